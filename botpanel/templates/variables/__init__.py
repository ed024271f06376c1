"""Template variables module.

Importing this module registers all template variables via decorators.
Each variable file defines extractors decorated with @register_variable.
"""

from botpanel.templates.variables import (  # noqa: F401 - side effect imports
    business,
    client,
    order,
    promotion,
)
from botpanel.templates.variables import datetime as datetime_vars  # noqa: F401
from botpanel.templates.variables.registry import (
    Category,
    VariableDefinition,
    VariableRegistry,
    get_registry,
    register_variable,
)

__all__ = [
    "Category",
    "VariableDefinition",
    "VariableRegistry",
    "get_registry",
    "register_variable",
]
