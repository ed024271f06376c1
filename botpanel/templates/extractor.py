"""Placeholder extraction.

A placeholder is '{' + name + '}' where name contains no braces. Anything
else (unbalanced or nested braces) is plain text and never raises.
"""

import re

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def extract_variables(text: str) -> list[str]:
    """Distinct variable names in order of first appearance.

    Examples:
        >>> extract_variables("Hola {nombre}, {nombre} tiene {puntos}")
        ['nombre', 'puntos']
        >>> extract_variables("Hola {nombre")
        []
    """
    if not text:
        return []
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text):
        seen.setdefault(match.group(1), None)
    return list(seen)
