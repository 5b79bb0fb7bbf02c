import re
from typing import Any

HEX_COLOR_PATTERN = re.compile(
    r"^#([0-9A-F]{3}|[0-9A-F]{4}|[0-9A-F]{6}|[0-9A-F]{8})$", re.IGNORECASE
)


def is_hex(color: Any) -> bool:
    """
    Check whether ``color`` is a ``#``-prefixed hex color.

    Accepts 3, 4, 6 or 8 digits (RGB, RGBA, RRGGBB, RRGGBBAA).
    """
    return isinstance(color, str) and HEX_COLOR_PATTERN.fullmatch(color) is not None


def rgb_to_hex(r: int, g: int, b: int) -> str:
    # The 1 << 24 sentinel keeps leading zeros; its digit is dropped
    return "#" + format((1 << 24) + (r << 16) + (g << 8) + b, "x")[1:]
