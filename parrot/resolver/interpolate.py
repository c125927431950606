"""Placeholder interpolation.

Replaces ``{name}`` tokens with values from the parameter bag, falling
back to the default placeholder store. Tokens with no value anywhere are
left exactly as written, braces included, so partially rendered text
shows what is still missing.

Substitution is a single pass: substituted values are never re-scanned.
"""

import re
from collections.abc import Mapping
from typing import Any

from parrot.resolver.defaults import DefaultStore

# Non-greedy so "{a} and {b}" yields two tokens; names are trimmed
TOKEN_PATTERN = re.compile(r"\{(.*?)\}")


def stringify(value: Any) -> str:
    """Render a parameter value the way it appears in text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def token_names(template: str) -> list[str]:
    """Names of all tokens in a template, in order, without duplicates."""
    seen: dict[str, None] = {}
    for match in TOKEN_PATTERN.finditer(template or ""):
        seen.setdefault(match.group(1).strip(), None)
    return list(seen)


def interpolate(
    template: str,
    params: Mapping[str, Any] | None,
    defaults: DefaultStore | None = None,
) -> str:
    """Resolve all ``{name}`` tokens in a template.

    Args:
        template: Text with {name} tokens
        params: Parameter bag (None values count as missing)
        defaults: Fallback placeholder store

    Returns:
        Text with every resolvable token replaced
    """
    if not template:
        return ""

    def replace_token(match: re.Match) -> str:
        name = match.group(1).strip()
        value = params.get(name) if params else None
        if value is None and defaults is not None:
            value = defaults.lookup(name)
        if value is None:
            return match.group(0)
        return stringify(value)

    return TOKEN_PATTERN.sub(replace_token, template)
