"""Promotion variables: name, validity window, redemption counts."""

from botpanel.templates.context import TemplateContext
from botpanel.templates.variables.registry import Category, register_variable
from botpanel.utilities.formatting import format_count, format_date

UNLIMITED = "Sin límite"


@register_variable(
    name="nombre_promocion",
    category=Category.PROMOTION,
    description="Nombre de la promoción",
    example="Black Friday Especial",
)
def extract_nombre_promocion(ctx: TemplateContext) -> str:
    return ctx.promotion.name or ""


@register_variable(
    name="descripcion_promocion",
    category=Category.PROMOTION,
    description="Descripción de la promoción",
    example="Aprovecha nuestras ofertas especiales",
)
def extract_descripcion_promocion(ctx: TemplateContext) -> str:
    return ctx.promotion.description or ""


@register_variable(
    name="fecha_inicio",
    category=Category.PROMOTION,
    description="Fecha de inicio",
    example="15 de noviembre de 2024",
)
def extract_fecha_inicio(ctx: TemplateContext) -> str:
    start = ctx.promotion.start_date
    return format_date(start) if start else ""


@register_variable(
    name="fecha_fin",
    category=Category.PROMOTION,
    description="Fecha de finalización",
    example="30 de noviembre de 2024",
)
def extract_fecha_fin(ctx: TemplateContext) -> str:
    end = ctx.promotion.end_date
    return format_date(end) if end else ""


@register_variable(
    name="usos_maximos",
    category=Category.PROMOTION,
    description="Número máximo de usos",
    example="100 personas",
)
def extract_usos_maximos(ctx: TemplateContext) -> str:
    # None = no redemption cap
    if ctx.promotion.max_uses is None:
        return UNLIMITED
    return format_count(ctx.promotion.max_uses, "personas")


@register_variable(
    name="usos_actuales",
    category=Category.PROMOTION,
    description="Usos realizados hasta ahora",
    example="45 personas",
)
def extract_usos_actuales(ctx: TemplateContext) -> str:
    return format_count(ctx.promotion.current_uses or 0, "personas")
