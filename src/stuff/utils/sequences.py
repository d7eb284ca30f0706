"""List helpers."""

from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equal(a: Any, b: Any) -> bool:
    """Client-side strict equality, with NaN matching NaN.

    ``int`` and ``float`` form a single number type, so ``1`` matches ``1.0``;
    ``bool`` stays separate, so ``True`` does not match ``1``.
    """
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        # NaN is the only number unequal to itself
        return a == b or (a != a and b != b)  # pylint: disable=comparison-with-itself
    return type(a) is type(b) and a == b


def pop_value(items: list[Any], value: Any) -> None:
    """Remove the last occurrence of ``value`` from ``items`` in place.

    Only one element is removed. Nothing happens if ``value`` is not present.

    Args:
        items: The list to modify.
        value: The value to look for.
    """
    for index in range(len(items) - 1, -1, -1):
        if _strict_equal(items[index], value):
            del items[index]
            return
