"""The closing animation: "THANKYOU" typed out letter by letter in cycling colours."""

from __future__ import annotations

from typing import Iterator

WORD = "THANKYOU"
FIRST_COLOR = 2
LAST_COLOR = 15
FRAME_DELAY_MS = 500
TOTAL_FRAMES = 300


def thank_you_frames(count: int = TOTAL_FRAMES) -> Iterator[tuple[str, int, bool]]:
    """Frames of the closing animation as (text, colour, clears screen after).

    The word grows one letter per frame; after the full word comes a blank
    frame after which the screen is cleared at once and typing starts again.
    Every other frame is held for FRAME_DELAY_MS.
    """
    if count < 0:
        raise ValueError("frame count cannot be negative")
    return _frames(count)


def _frames(count: int) -> Iterator[tuple[str, int, bool]]:
    color = FIRST_COLOR
    cycle = len(WORD) + 1
    for t in range(count):
        step = t % cycle
        if step < len(WORD):
            yield WORD[: step + 1], color, False
        else:
            yield "", color, True
        color = color + 1 if color < LAST_COLOR else FIRST_COLOR