"""Variable catalog for the automation editor.

Which variables a template may use depends on what triggers the
automation: order triggers carry an order, and a linked promotion adds the
promotion variables. Client, business and date/time variables are always
available.
"""

import re
from dataclasses import dataclass, field

from botpanel.templates.extractor import extract_variables
from botpanel.templates.variables import Category, VariableDefinition, get_registry

ORDER_TRIGGERS = frozenset({"new_order", "order_ready"})

# Meta's positional template parameters, e.g. {{1}}
META_PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True)
class VariableInfo:
    """Catalog entry shown in the editor."""

    name: str
    type: str
    description: str
    example: str

    @classmethod
    def from_definition(cls, definition: VariableDefinition) -> "VariableInfo":
        return cls(
            name=definition.name,
            type=definition.category.value,
            description=definition.description,
            example=definition.example,
        )


@dataclass
class ValidationResult:
    """Variables split by availability, in the order given."""

    valid: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.invalid


def available_variables(trigger_type: str, has_promotion: bool = False) -> list[VariableInfo]:
    """Variables usable by an automation with this trigger."""
    categories = [Category.CLIENT, Category.BUSINESS, Category.DATETIME]
    if trigger_type in ORDER_TRIGGERS:
        categories.append(Category.ORDER)
    if has_promotion:
        categories.append(Category.PROMOTION)

    registry = get_registry()
    return [
        VariableInfo.from_definition(definition)
        for category in categories
        for definition in registry.by_category(category)
    ]


def validate_variables(
    names: list[str],
    trigger_type: str,
    has_promotion: bool = False,
) -> ValidationResult:
    """Partition variable names into available and unavailable."""
    available = {v.name for v in available_variables(trigger_type, has_promotion)}
    result = ValidationResult()
    for name in names:
        if name in available:
            result.valid.append(name)
        else:
            result.invalid.append(name)
    return result


def variable_suggestions(
    text: str,
    trigger_type: str,
    has_promotion: bool = False,
) -> list[VariableInfo]:
    """Available variables not used in the text yet."""
    used = set(extract_variables(text))
    return [v for v in available_variables(trigger_type, has_promotion) if v.name not in used]


def convert_meta_variables(text: str, mapping: dict[str, str]) -> str:
    """Rewrite Meta positional placeholders as named ones.

    Example:
        >>> convert_meta_variables("Hola {{1}}", {"1": "nombre"})
        'Hola {nombre}'

    Positions missing from the mapping are left as they are.
    """

    def _replace(match) -> str:
        name = mapping.get(match.group(1))
        return "{" + name + "}" if name else match.group(0)

    return META_PLACEHOLDER_PATTERN.sub(_replace, text)
