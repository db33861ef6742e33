"""Layout arithmetic for the centred combo box label and the info icon."""

from __future__ import annotations

import math

_ARROW_SHARE = 3.2
_TEXT_SLACK = 1.1


def centered_label_offset(
    center_x: int, right: int, arrow_width: int, text_width: float
) -> int:
    """Left edge for a label centred between the box and its arrow, kept on screen."""
    offset = math.trunc(center_x - arrow_width / _ARROW_SHARE - text_width / 2)
    limit = right - arrow_width
    overflow = offset + text_width * _TEXT_SLACK - limit
    if overflow > 0:
        offset = max(0, math.trunc(offset - overflow))
    return offset


def info_label_height_for_width(
    width: int, pix_width: int, pix_height: int, current_height: int
) -> int:
    """Height that keeps the icon's aspect ratio; without an icon, the current height."""
    if pix_width <= 0 or pix_height <= 0:
        return current_height
    return math.trunc(pix_height * width / pix_width)