"""Hypothesis property tests for the query-string helpers.

- **State round trip**: `uri_to_state(state_to_uri(s)) == s` whenever keys
  avoid the characters that the value-only encoding leaves raw.
- **New parameters win**: merging keeps every old key and lets the new URL's
  value win on collision.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stuff.utils.query import (
    extend_query_params,
    parse_query,
    stringify_query,
    state_to_uri,
    uri_to_state,
)

pytestmark = [pytest.mark.property]

text = st.text(alphabet=st.characters(exclude_categories=("Cs",)))
state_keys = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="=&?"),
    min_size=1,
)


@given(st.dictionaries(state_keys, text))
def test_state_round_trip(state):
    """Any state with plain keys survives serialization."""
    assert uri_to_state(state_to_uri(state)) == state


@given(st.dictionaries(text, text), st.dictionaries(text, text))
def test_new_parameters_win(old, new):
    """The merged query equals the old parameters updated by the new ones."""
    result = extend_query_params(f"/p?{stringify_query(new)}", old)
    base, _, query = result.partition("?")
    assert base == "/p"
    assert parse_query(query) == {**old, **new}
