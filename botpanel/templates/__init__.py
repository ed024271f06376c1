"""Template engine module.

This module provides variable resolution for automated messages.
Variables are substituted in message templates like:
    "Hola {nombre}, tu pedido {numero_pedido} está listo"
    -> "Hola María González, tu pedido #1042 está listo"

Unresolvable placeholders are left in the text untouched.
"""

from botpanel.templates.catalog import (
    ValidationResult,
    VariableInfo,
    available_variables,
    convert_meta_variables,
    validate_variables,
    variable_suggestions,
)
from botpanel.templates.context import TemplateContext, VariableContext
from botpanel.templates.context_builder import ContextBuilder, build_context
from botpanel.templates.extractor import extract_variables
from botpanel.templates.resolver import TemplateResolver, resolve, substitute
from botpanel.templates.variables import (
    Category,
    VariableRegistry,
    get_registry,
)

__all__ = [
    # Catalog
    "ValidationResult",
    "VariableInfo",
    "available_variables",
    "convert_meta_variables",
    "validate_variables",
    "variable_suggestions",
    # Context builder
    "ContextBuilder",
    "build_context",
    # Context types
    "TemplateContext",
    "VariableContext",
    # Resolver
    "TemplateResolver",
    "extract_variables",
    "resolve",
    "substitute",
    # Registry
    "Category",
    "VariableRegistry",
    "get_registry",
]
