"""Variable registry.

Each template variable is declared once with @register_variable on an
extractor function. The registry groups variables by Category so the
resolver can produce one value table per data source:

    @register_variable(
        name="nombre",
        category=Category.CLIENT,
        description="Nombre completo del cliente",
        example="Juan Pérez",
    )
    def extract_nombre(ctx: TemplateContext) -> str:
        return ctx.client.name
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from botpanel.templates.context import TemplateContext

Extractor = Callable[[TemplateContext], str]


class Category(str, Enum):
    """Data source a variable is read from.

    Declaration order is the merge order of the value table: later
    categories override earlier ones on a name collision.
    """

    CLIENT = "client"
    BUSINESS = "business"
    PROMOTION = "promotion"
    ORDER = "order"
    DATETIME = "datetime"


@dataclass(frozen=True)
class VariableDefinition:
    """A registered template variable."""

    name: str
    category: Category
    extractor: Extractor
    description: str = ""
    example: str = ""

    @property
    def placeholder(self) -> str:
        return "{" + self.name + "}"


class VariableRegistry:
    """Holds every known variable, keyed by name."""

    def __init__(self):
        self._variables: dict[str, VariableDefinition] = {}

    def register(self, definition: VariableDefinition) -> None:
        if definition.name in self._variables:
            raise ValueError(f"Variable '{definition.name}' is already registered")
        self._variables[definition.name] = definition

    def get(self, name: str) -> VariableDefinition | None:
        return self._variables.get(name)

    def all(self) -> list[VariableDefinition]:
        return list(self._variables.values())

    def by_category(self, category: Category) -> list[VariableDefinition]:
        return [v for v in self._variables.values() if v.category == category]

    def extract_category(self, category: Category, ctx: TemplateContext) -> dict[str, str]:
        """Run every extractor of one category against the context.

        Returns name -> display string. Extractor errors propagate.
        """
        return {v.name: v.extractor(ctx) for v in self.by_category(category)}

    def __contains__(self, name: str) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)


_registry = VariableRegistry()


def get_registry() -> VariableRegistry:
    """Get the process-wide variable registry."""
    return _registry


def register_variable(
    name: str,
    category: Category,
    description: str = "",
    example: str = "",
) -> Callable[[Extractor], Extractor]:
    """Decorator registering an extractor under a template variable name."""

    def decorator(func: Extractor) -> Extractor:
        _registry.register(
            VariableDefinition(
                name=name,
                category=category,
                extractor=func,
                description=description,
                example=example,
            )
        )
        return func

    return decorator
