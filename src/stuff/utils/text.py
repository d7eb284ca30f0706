"""String helpers: positional formatting and capitalization."""

import re
from collections.abc import Sequence
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"%(\d+)")


def format_string(template: str, values: Sequence[Any]) -> str:
    """Substitute ``%N`` placeholders with positional values.

    ``%1`` refers to ``values[0]``, ``%2`` to ``values[1]`` and so on. Values
    are converted with ``str``. Placeholders pointing outside ``values``
    (including ``%0``) are replaced with an empty string.

    There is no escape sequence for a literal ``%N``.

    Args:
        template: The string to format.
        values: Values for the placeholders, in order.

    Returns:
        The formatted string.

    Example:
        ```py
        format_string("Hello %1 and %2", ["Vasya", "Petya"])
        # 'Hello Vasya and Petya'
        ```
    """

    def _substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if 1 <= index <= len(values):
            return str(values[index - 1])
        return ""

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def capitalize(value: Any) -> str:
    """Uppercase the first character of ``value``, leaving the rest untouched.

    ``None`` is treated as an empty string; anything else goes through ``str``.
    Unlike ``str.capitalize`` the remainder is not lowercased.
    """
    text = "" if value is None else str(value)
    return text[:1].upper() + text[1:]
