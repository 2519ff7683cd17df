"""Geometry of the pixel-style widgets: dotted lines, boxes and drop-down menus."""

from __future__ import annotations

from dataclasses import dataclass

# A drop-down menu that would reach this row opens upwards instead.
MENU_BOTTOM_LIMIT = 470


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by two corners."""

    x1: int
    y1: int
    x2: int
    y2: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies strictly inside the rectangle."""
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


def printline(
    x: int, y: int, length: int, count: int, vertical: bool, width: int, gap: int
) -> list[Rect]:
    """Square blocks of a dashed line: `count` dashes of `length` blocks each."""
    blocks: list[Rect] = []
    for _ in range(count):
        for _ in range(length):
            blocks.append(Rect(x, y, x + width, y + width))
            if vertical:
                y += width
            else:
                x += width
        if vertical:
            y += gap
        else:
            x += gap
    return blocks


def _fit(span: int, length: int, width: int, gap: int) -> tuple[int, int]:
    step = width * length + gap
    count = span // step
    remain = span - (count * step - gap)
    if remain < width * length:
        remain += width * length
    return count, remain // 2


def printbox(
    x1: int, y1: int, x2: int, y2: int, length: int, width: int, gap: int
) -> list[Rect]:
    """Blocks of a dashed rectangular frame between the two corners."""
    horizontal, offset_x = _fit(abs(x2 - x1), length, width, gap)
    vertical, offset_y = _fit(abs(y2 - y1), length, width, gap)
    return (
        printline(x1 + offset_x, y1, length, horizontal, False, width, gap)
        + printline(x1 + offset_x, y2 - width, length, horizontal, False, width, gap)
        + printline(x1, y1 + offset_y, length, vertical, True, width, gap)
        + printline(x2 - width, y1 + offset_y, length, vertical, True, width, gap)
    )


def truncate(text: str, length: int) -> str:
    """Cut a text that reaches `length` characters and mark the cut with '~'."""
    if length < 1:
        raise ValueError("length must be positive")
    if len(text) < length:
        return text
    return text[:length] + "~"


def dropdown_regions(x: int, y: int, width: int, height: int, count: int) -> list[Rect]:
    """Hit regions of a drop-down menu's items, in item order.

    The menu opens downwards from (x, y) unless it would reach the bottom
    limit of the screen, in which case it opens upwards.
    """
    if y + count * height < MENU_BOTTOM_LIMIT:
        return [
            Rect(x, y + i * height, x + width, y + (i + 1) * height)
            for i in range(count)
        ]
    return [
        Rect(x, y - (i + 1) * height, x + width, y - i * height) for i in range(count)
    ]