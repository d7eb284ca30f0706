"""URL query-string helpers.

Two families live here:

- ``state_to_uri`` / ``uri_to_state`` serialize a flat state mapping. Only
  values are percent-encoded and decoded; keys are written and read verbatim.
  Callers rely on that, so keys containing ``=`` or ``&`` do not round-trip.
- ``parse_query`` / ``stringify_query`` are a full codec (keys and values
  encoded, ``+`` read as space, repeated keys collected into lists). They back
  ``extend_query`` and ``extend_query_params``, which merge the query of an
  old URL into a new one.
"""

from collections.abc import Mapping
from typing import Any, TypeAlias
from urllib.parse import parse_qsl, quote, unquote

QueryValue: TypeAlias = str | list[str]
QueryParams: TypeAlias = dict[str, QueryValue]

# Characters left unescaped besides letters, digits and "_.-~" (always safe
# for urllib.parse.quote). Together they form the encodeURIComponent set.
URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: Any) -> str:
    """Percent-encode a single key or value.

    ``None`` becomes ``""`` and booleans are written ``true``/``false``, the
    way the client side spells them. Anything else goes through ``str``.
    """
    if value is None:
        text = ""
    elif isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe=URI_COMPONENT_SAFE)


# ============================================================================
#                           State <-> URI
# ============================================================================


def state_to_uri(state: Mapping[str, Any]) -> str:
    """Serialize ``state`` as ``key=value`` pairs joined by ``&``.

    Pairs follow the iteration order of ``state``. Values go through
    `encode_component`; keys are emitted as-is.
    """
    return "&".join(f"{key}={encode_component(value)}" for key, value in state.items())


def uri_to_state(uri: str | None) -> dict[str, str]:
    """Parse a query string produced by `state_to_uri`.

    A leading ``?`` is ignored. Each non-empty ``&``-separated segment is split
    on its first ``=``; the value is percent-decoded, the name is not. A
    segment without ``=`` maps to ``""``; a segment starting with ``=``
    has the empty name. Later duplicates win.

    Args:
        uri: The query string, with or without the leading ``?``.

    Returns:
        The decoded state. Empty when ``uri`` is empty or ``None``.
    """
    result: dict[str, str] = {}
    if not uri:
        return result

    uri = uri.removeprefix("?")
    for part in uri.split("&"):
        if not part:
            continue
        name, _, value = part.partition("=")
        result[name] = unquote(value)
    return result


# ============================================================================
#                           Query codec
# ============================================================================


def parse_query(query: str) -> QueryParams:
    """Parse a query string (without the ``?``) into a parameter mapping.

    Keys and values are decoded (``+`` means a space). Blank values are kept.
    A key seen more than once maps to the list of its values, in order.
    """
    params: QueryParams = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key not in params:
            params[key] = value
            continue
        existing = params[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            params[key] = [existing, value]
    return params


def stringify_query(params: Mapping[str, Any]) -> str:
    """Serialize a parameter mapping, encoding both keys and values.

    List and tuple values produce one pair per item under the same key.
    """
    pairs: list[str] = []
    for key, value in params.items():
        encoded_key = encode_component(key)
        items = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend(f"{encoded_key}={encode_component(item)}" for item in items)
    return "&".join(pairs)


# ============================================================================
#                           Query extension
# ============================================================================


def _split_url(url: str) -> tuple[str, str]:
    """Split ``url`` at its first ``?`` into (base, query)."""
    base, _, query = url.partition("?")
    return base, query


def _merge(
    new_url: str, old_params: dict[str, Any], forced_renew_param: str | None
) -> str:
    base, new_query = _split_url(new_url)
    new_params = parse_query(new_query) if new_query else {}

    if forced_renew_param:
        old_params.pop(forced_renew_param, None)

    merged = {**old_params, **new_params}
    if not merged:
        return base
    return f"{base}?{stringify_query(merged)}"


def extend_query(
    new_url: str | None, old_url: str | None, forced_renew_param: str | None = None
) -> str:
    """Carry the query parameters of ``old_url`` over to ``new_url``.

    The result keeps the part of ``new_url`` before its first ``?`` and
    appends the merged query. Parameters of ``new_url`` win on collision;
    parameters only present in ``old_url`` are kept.

    Args:
        new_url: The target URL; may carry its own query.
        old_url: The URL (or bare query after a ``?``) to take parameters from.
        forced_renew_param: A key whose old value is dropped before merging,
            so that only the new value (or none) survives.

    Returns:
        The merged URL. ``""`` when both URLs are empty; ``new_url`` unchanged
        when only ``old_url`` is empty.

    Example:
        ```py
        extend_query("/path?b=2", "/old?a=1&b=9")
        # '/path?a=1&b=2'
        ```
    """
    new_url = new_url or ""
    if not old_url:
        return new_url

    _, old_query = _split_url(old_url)
    old_params = parse_query(old_query) if old_query else {}
    return _merge(new_url, old_params, forced_renew_param)


def extend_query_params(
    new_url: str | None,
    old_params: Mapping[str, Any] | None,
    forced_renew_param: str | None = None,
) -> str:
    """Like `extend_query`, with the old parameters already parsed.

    ``old_params`` is taken as decoded key/value pairs and is not modified.
    """
    new_url = new_url or ""
    if not old_params:
        return new_url

    return _merge(new_url, dict(old_params), forced_renew_param)
