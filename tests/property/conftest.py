"""Hypothesis strategies for property testing.

Provides reusable composite strategies for generating path-info data:
field names and values, and raw PATH_INFO strings built from them.
"""

from hypothesis import strategies as st

from src.path_params.codec import url_encode


@st.composite
def field_pairs(draw, max_size=10):
    """Generate (name, value) pairs, with repeated names likely.

    Args:
        draw: Hypothesis draw function
        max_size: Maximum number of pairs

    Returns:
        list[tuple[str, str]]: Decoded name/value pairs in path order
    """
    names = draw(st.lists(st.text(max_size=8), min_size=1, max_size=4))
    return draw(
        st.lists(
            st.tuples(st.sampled_from(names), st.text(max_size=20)),
            max_size=max_size,
        )
    )


@st.composite
def path_info(draw, pairs=None):
    """Generate a default-format PATH_INFO string.

    Pairs are encoded with url_encode, joined by '/' with '-' between name
    and value, with random leading/trailing '/' runs and orphan segments.

    Returns:
        tuple[str, list[tuple[str, str]]]: PATH_INFO and the pairs it encodes
    """
    if pairs is None:
        pairs = draw(field_pairs())
    segments = [f"{url_encode(name)}-{url_encode(value)}" for name, value in pairs]

    # Orphans never contain the '-' separator, so they must be dropped
    orphans = draw(
        st.lists(st.text(alphabet="abcXYZ019%", min_size=1, max_size=6), max_size=3)
    )
    for orphan in orphans:
        position = draw(st.integers(min_value=0, max_value=len(segments)))
        segments.insert(position, orphan)

    leading = "/" * draw(st.integers(min_value=0, max_value=3))
    trailing = "/" * draw(st.integers(min_value=0, max_value=3))
    return leading + "/".join(segments) + trailing, pairs
