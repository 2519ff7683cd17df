import pytest
from hypothesis import given, strategies as st

from dronefarm.widgets import (
    MENU_BOTTOM_LIMIT,
    Rect,
    dropdown_regions,
    printbox,
    printline,
    truncate,
)


def test_rect_contains_is_strict():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains(5, 5) is True
    assert rect.contains(0, 5) is False
    assert rect.contains(5, 10) is False


def test_printline_horizontal_blocks_are_contiguous_within_a_dash():
    blocks = printline(100, 0, 3, 2, False, 5, 4)
    assert len(blocks) == 6
    assert blocks[0] == Rect(100, 0, 105, 5)
    assert blocks[1].x1 == blocks[0].x2
    assert blocks[3].x1 == blocks[2].x2 + 4
    assert all(b.y1 == 0 for b in blocks)


def test_printline_vertical_moves_down():
    blocks = printline(10, 20, 1, 4, True, 5, 5)
    assert [b.x1 for b in blocks] == [10] * 4
    ys = [b.y1 for b in blocks]
    assert ys == sorted(ys)
    assert all(b2.y1 - b1.y1 == 10 for b1, b2 in zip(blocks, blocks[1:]))


@given(
    st.integers(0, 10),
    st.integers(0, 10),
    st.integers(1, 6),
    st.integers(1, 8),
    st.integers(0, 6),
    st.booleans(),
)
def test_printline_block_count_and_size(length, count, width, gap, x, vertical):
    blocks = printline(x, 0, length, count, vertical, width, gap)
    assert len(blocks) == length * count
    assert all(b.x2 - b.x1 == width and b.y2 - b.y1 == width for b in blocks)


@given(
    st.integers(0, 300),
    st.integers(0, 300),
    st.integers(40, 300),
    st.integers(40, 300),
    st.integers(1, 2),
    st.integers(2, 6),
    st.integers(2, 6),
)
def test_printbox_stays_inside_its_frame(x1, y1, w, h, length, width, gap):
    x2, y2 = x1 + w, y1 + h
    blocks = printbox(x1, y1, x2, y2, length, width, gap)
    assert blocks
    for b in blocks:
        assert x1 <= b.x1 and b.x2 <= x2 + width
        assert y1 <= b.y1 and b.y2 <= y2 + width


def test_printbox_back_button_edges():
    blocks = printbox(595, 5, 630, 40, 1, 5, 4)
    tops = [b for b in blocks if b.y1 == 5]
    lefts = [b for b in blocks if b.x1 == 595]
    rights = [b for b in blocks if b.x1 == 625]
    assert tops and lefts and rights
    assert len(lefts) == len(rights)
    assert any(b.y1 == 35 for b in blocks)


def test_truncate_long_text():
    assert truncate("abcdefgh", 4) == "abcd~"


def test_truncate_short_text_unchanged():
    assert truncate("abc", 5) == "abc"
    assert truncate("abcd", 5) == "abcd"


@given(st.text(min_size=1, max_size=30), st.integers(1, 30))
def test_truncate_invariants(text, length):
    result = truncate(text, length)
    if len(text) >= length:
        assert result.endswith("~")
        assert len(result) == length + 1
        assert text.startswith(result[:-1])
    else:
        assert result == text


def test_truncate_rejects_nonpositive_length():
    with pytest.raises(ValueError):
        truncate("abc", 0)


def test_dropdown_opens_downwards_when_room():
    regions = dropdown_regions(230, 360, 180, 40, 2)
    assert regions[0].y1 == 360
    assert regions[0].y2 == regions[1].y1
    assert all(r.x1 == 230 and r.x2 == 410 for r in regions)
    assert regions[-1].y2 < MENU_BOTTOM_LIMIT


def test_dropdown_opens_upwards_near_bottom():
    regions = dropdown_regions(310, 380, 280, 50, 2)
    assert regions[0].y2 == 380
    assert regions[1].y2 == regions[0].y1
    assert all(r.y2 - r.y1 == 50 for r in regions)


@given(st.integers(0, 600), st.integers(0, 470), st.integers(5, 60), st.integers(1, 6))
def test_dropdown_regions_do_not_overlap(x, y, h, n):
    regions = dropdown_regions(x, y, 80, h, n)
    assert len(regions) == n
    spans = sorted((r.y1, r.y2) for r in regions)
    assert all(a[1] <= b[0] for a, b in zip(spans, spans[1:]))