"""Order variables for order-triggered automations."""

from botpanel.templates.context import TemplateContext
from botpanel.templates.variables.registry import Category, register_variable
from botpanel.utilities.formatting import format_currency, format_date


@register_variable(
    name="numero_pedido",
    category=Category.ORDER,
    description="Número del pedido",
    example="#12345",
)
def extract_numero_pedido(ctx: TemplateContext) -> str:
    return ctx.order.order_number or ""


@register_variable(
    name="total_pedido",
    category=Category.ORDER,
    description="Total del pedido",
    example="$99.99",
)
def extract_total_pedido(ctx: TemplateContext) -> str:
    total = ctx.order.total_amount
    return format_currency(total) if total else ""


@register_variable(
    name="estado_pedido",
    category=Category.ORDER,
    description="Estado del pedido",
    example="En preparación",
)
def extract_estado_pedido(ctx: TemplateContext) -> str:
    return ctx.order.status or ""


@register_variable(
    name="fecha_entrega",
    category=Category.ORDER,
    description="Fecha de entrega estimada",
    example="15 de noviembre de 2024",
)
def extract_fecha_entrega(ctx: TemplateContext) -> str:
    delivery = ctx.order.estimated_delivery_date
    return format_date(delivery) if delivery else ""
