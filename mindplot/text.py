"""Font size fitting for node labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

MeasureWidth = Callable[[float, str], float]


@dataclass(frozen=True)
class TextFit:
    """Result of fitting a label: rendered width and font size (height)."""

    width: float
    height: float


def estimate_text_width(text: str, font_size: float, char_width: float = 0.55) -> float:
    """Estimate width of text based on character count.

    `char_width` is the average glyph width as a fraction of the font size.
    """
    return len(text) * font_size * char_width


def fit_text(
    measure_width: MeasureWidth,
    box_width: float,
    box_height: float,
    text: str,
    min_size: float = 4,
    max_size: float = 500,
    iterations: int = 10,
) -> TextFit:
    """Find the largest font size at which `text` fits the box.

    Bisects ``[min_size, max_size]`` a fixed number of times. A size fits when
    it is no taller than `box_height` and its measured width is no wider than
    `box_width`. `measure_width` is called exactly ``iterations + 1`` times.

    Args:
        measure_width: Callable ``(font_size, text) -> width``
        box_width: Available width
        box_height: Available height
        text: Label to fit
        min_size: Smallest font size considered
        max_size: Largest font size considered
        iterations: Number of bisection steps

    Returns:
        TextFit with the chosen size as `height` and its measured `width`.
        When nothing fits, `height` is `min_size`.
    """
    lower, upper = min_size, max_size
    for _ in range(iterations):
        pivot = upper / 2 + lower / 2
        width = measure_width(pivot, text)
        if pivot > box_height or width > box_width:
            upper = pivot
        else:
            lower = pivot
    return TextFit(width=measure_width(lower, text), height=lower)
