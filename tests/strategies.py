"""Shared hypothesis strategies for minimal property-based tests.

- **Text**: fragments written into output buffers
- **Names**: helper-like identifiers for the classifier and the router
"""

from __future__ import annotations

from hypothesis import strategies as st

# ---------------------------------------------------------------------------
# Buffer strategies
# ---------------------------------------------------------------------------

# Non-empty fragments; empty appends are no-ops and covered separately
fragment = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    min_size=1,
    max_size=40,
)
fragments = st.lists(fragment, min_size=1, max_size=12)

# Any value a block might return
block_result = st.one_of(
    st.none(),
    st.text(max_size=20),
    st.integers(),
    st.floats(allow_nan=False),
)

# ---------------------------------------------------------------------------
# Name strategies
# ---------------------------------------------------------------------------

identifier = st.from_regex(r"[a-z][a-z0-9_]{0,15}", fullmatch=True)

# Nesting plans for capture scopes: each entry writes text then optionally
# opens a child scope
scope_tree = st.recursive(
    st.lists(fragment, max_size=3).map(lambda texts: {"texts": texts, "children": []}),
    lambda children: st.builds(
        lambda texts, kids: {"texts": texts, "children": kids},
        st.lists(fragment, max_size=3),
        st.lists(children, max_size=3),
    ),
    max_leaves=10,
)
