"""Client variables: name, contact details, loyalty data.

Only evaluated when a client record is available (real or preview).
"""

from botpanel.templates.context import TemplateContext
from botpanel.templates.variables.registry import Category, register_variable
from botpanel.utilities.formatting import format_count, format_currency, format_date

NO_PURCHASES = "Sin compras registradas"


@register_variable(
    name="nombre",
    category=Category.CLIENT,
    description="Nombre completo del cliente",
    example="Juan Pérez",
)
def extract_nombre(ctx: TemplateContext) -> str:
    return ctx.client.name


@register_variable(
    name="email",
    category=Category.CLIENT,
    description="Email del cliente",
    example="juan@email.com",
)
def extract_email(ctx: TemplateContext) -> str:
    return ctx.client.email


@register_variable(
    name="telefono",
    category=Category.CLIENT,
    description="Teléfono del cliente",
    example="+57 300 123 4567",
)
def extract_telefono(ctx: TemplateContext) -> str:
    return ctx.client.phone


@register_variable(
    name="instagram_usuario",
    category=Category.CLIENT,
    description="Usuario público de Instagram",
    example="@juanperez",
)
def extract_instagram_usuario(ctx: TemplateContext) -> str:
    return ctx.client.instagram_username


@register_variable(
    name="puntos",
    category=Category.CLIENT,
    description="Puntos acumulados",
    example="150 puntos",
)
def extract_puntos(ctx: TemplateContext) -> str:
    return format_count(ctx.client.points or 0, "puntos")


@register_variable(
    name="total_compras",
    category=Category.CLIENT,
    description="Total de compras realizadas",
    example="$1,250.00",
)
def extract_total_compras(ctx: TemplateContext) -> str:
    return format_currency(ctx.client.total_purchases or 0)


@register_variable(
    name="ultima_compra",
    category=Category.CLIENT,
    description="Fecha de la última compra",
    example="15 de octubre de 2024",
)
def extract_ultima_compra(ctx: TemplateContext) -> str:
    if ctx.client.last_purchase_date is None:
        return NO_PURCHASES
    return format_date(ctx.client.last_purchase_date)
