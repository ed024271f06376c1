"""Business variables from the user's profile.

Missing profile fields come out as empty strings; the resolver then keeps
the literal placeholder in the message.
"""

from botpanel.templates.context import TemplateContext
from botpanel.templates.variables.registry import Category, register_variable


@register_variable(
    name="nombre_negocio",
    category=Category.BUSINESS,
    description="Nombre del negocio",
    example="Mi Tienda",
)
def extract_nombre_negocio(ctx: TemplateContext) -> str:
    return ctx.business.business_name or ""


@register_variable(
    name="descripcion_negocio",
    category=Category.BUSINESS,
    description="Descripción del negocio",
    example="Tu tienda de confianza",
)
def extract_descripcion_negocio(ctx: TemplateContext) -> str:
    return ctx.business.business_description or ""


@register_variable(
    name="ubicacion",
    category=Category.BUSINESS,
    description="Ubicación del negocio",
    example="Centro Comercial Plaza",
)
def extract_ubicacion(ctx: TemplateContext) -> str:
    return ctx.business.location or ""


@register_variable(
    name="enlace_menu",
    category=Category.BUSINESS,
    description="Enlace al menú",
    example="www.mitienda.com/menu",
)
def extract_enlace_menu(ctx: TemplateContext) -> str:
    return ctx.business.menu_link or ""
