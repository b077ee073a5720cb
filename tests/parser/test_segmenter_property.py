# topmark:header:start
#
#   project      : TSErrors
#   file         : test_segmenter_property.py
#   file_relpath : tests/parser/test_segmenter_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the segmenter.

Messages are drawn from a small alphabet rich in quotes and delimiters (but
without backticks), so every text segment that starts and ends with a backtick
is known to come from a quoted span and the original message can be rebuilt.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tserrors.parser.segmenter import segment
from tserrors.parser.segments import Segment

_ALPHABET: str = "ab :;|&={}[]()<>'"

s_message: st.SearchStrategy[str] = st.text(alphabet=_ALPHABET, max_size=120)
s_prose: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_characters="'`"), min_size=1, max_size=80
)


def _rebuild(parts: list[Segment]) -> str:
    out: list[str] = []
    for seg in parts:
        if seg.is_code:
            out.append(f"'{seg.content}'")
        elif len(seg.content) >= 2 and seg.content.startswith("`") and seg.content.endswith("`"):
            out.append(f"'{seg.content[1:-1]}'")
        else:
            out.append(seg.content)
    return "".join(out)


@settings(max_examples=300, deadline=None)
@given(message=s_message)
def test_segments_rebuild_the_message(message: str) -> None:
    """Concatenating segments (quotes restored) gives back the input."""
    assert _rebuild(segment(message)) == message


@settings(max_examples=300, deadline=None)
@given(message=s_message)
def test_no_segment_is_empty(message: str) -> None:
    """Every produced segment has non-empty content."""
    assert all(seg.content for seg in segment(message))


@settings(max_examples=200, deadline=None)
@given(message=s_prose)
def test_quote_free_message_is_one_text_segment(message: str) -> None:
    """Without quotes the message is returned as one text segment."""
    assert segment(message) == [Segment.text(message)]


@pytest.mark.hypothesis_slow
@settings(max_examples=5000, deadline=None)
@given(message=st.text(alphabet=_ALPHABET + "ABCxyz0_", max_size=400))
def test_segments_rebuild_long_messages(message: str) -> None:
    """Long messages over a wider alphabet still round-trip."""
    parts: list[Segment] = segment(message)
    assert all(seg.content for seg in parts)
    assert _rebuild(parts) == message
