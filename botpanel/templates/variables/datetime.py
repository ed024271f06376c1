"""DateTime variables derived from the current instant.

No lookups; ctx.now is already in the user timezone.
"""

from botpanel.templates.context import TemplateContext
from botpanel.templates.variables.registry import Category, register_variable
from botpanel.utilities.formatting import format_date, format_time, weekday_name


@register_variable(
    name="fecha_actual",
    category=Category.DATETIME,
    description="Fecha actual",
    example="15 de noviembre de 2024",
)
def extract_fecha_actual(ctx: TemplateContext) -> str:
    return format_date(ctx.now)


@register_variable(
    name="hora_actual",
    category=Category.DATETIME,
    description="Hora actual",
    example="14:30",
)
def extract_hora_actual(ctx: TemplateContext) -> str:
    return format_time(ctx.now)


@register_variable(
    name="dia_semana",
    category=Category.DATETIME,
    description="Día de la semana",
    example="Lunes",
)
def extract_dia_semana(ctx: TemplateContext) -> str:
    return weekday_name(ctx.now)
