"""
Naming utilities for igniteorm.
"""

import re


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")
_PLAIN_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]*$")


def camel_to_snake(name: str) -> str:
    """
    Convert ``camelCase`` flag names such as ``primaryKeyNames`` to
    ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", step1).lower()
    return snake


def is_plain_identifier(name: str) -> bool:
    """
    True when ``name`` can appear unquoted: a letter or underscore followed by
    letters, digits, underscores or ``$``.
    """
    return bool(_PLAIN_IDENTIFIER_RE.match(name))
