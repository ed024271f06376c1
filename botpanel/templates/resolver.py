"""Template resolver.

Replaces {variable} placeholders in automated message templates with
values from the registered variable extractors:

    "Hola {nombre}, tienes {puntos}" -> "Hola María González, tienes 250 puntos"

Placeholders that cannot be resolved stay in the text as-is, so a missing
value shows up as a visible '{variable}' rather than a silent gap.
"""

import logging

from botpanel.core import DataStore
from botpanel.templates.context import TemplateContext, VariableContext
from botpanel.templates.context_builder import ContextBuilder
from botpanel.templates.extractor import PLACEHOLDER_PATTERN, extract_variables
from botpanel.templates.variables import Category, VariableRegistry, get_registry

logger = logging.getLogger(__name__)

# Record backing each category; DATETIME has none and always applies
_CATEGORY_RECORDS = {
    Category.CLIENT: "client",
    Category.BUSINESS: "business",
    Category.PROMOTION: "promotion",
    Category.ORDER: "order",
}


def substitute(template: str, values: dict[str, str]) -> str:
    """Replace every {name} whose name is in values.

    Single pass over the template, so a value that itself contains braces
    is never expanded again. Empty values and unknown names keep the
    literal placeholder.
    """

    def _replace(match) -> str:
        value = values.get(match.group(1))
        return value if value else match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


class TemplateResolver:
    """Resolves message templates against live business data.

    Usage:
        resolver = TemplateResolver(store)
        text = resolver.resolve(
            "Hola {nombre}, tu pedido {numero_pedido} está {estado_pedido}",
            VariableContext.from_ids(user_id, "whatsapp", client_id=cid, order_id=oid),
        )
    """

    def __init__(
        self,
        store: DataStore,
        registry: VariableRegistry | None = None,
        context_builder: ContextBuilder | None = None,
    ):
        self._registry = registry or get_registry()
        self._builder = context_builder or ContextBuilder(store)

    def resolve(self, template: str, context: VariableContext) -> str:
        """Resolve all variables in a template.

        Never raises: on any unexpected error the original template is
        returned unchanged.
        """
        try:
            if not extract_variables(template):
                return template

            ctx = self._builder.build(context)
            values = self.build_values(ctx)
            return substitute(template, values)
        except Exception:
            logger.exception("Error resolving template variables, returning template unchanged")
            return template

    def build_values(self, ctx: TemplateContext) -> dict[str, str]:
        """Merge per-category values into one table.

        Categories without a record contribute nothing. Merge order is
        client, business, promotion, order, datetime; later wins.
        """
        values: dict[str, str] = {}
        for category in Category:
            record_attr = _CATEGORY_RECORDS.get(category)
            if record_attr and getattr(ctx, record_attr) is None:
                continue
            values.update(self._registry.extract_category(category, ctx))
        return values


def resolve(template: str, context: VariableContext, store: DataStore) -> str:
    """Convenience function to resolve a template with default settings."""
    return TemplateResolver(store).resolve(template, context)
