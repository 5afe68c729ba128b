"""
Color Utilities
===============

Hex/RGB conversion and color averaging for mandala centers and tags.

@author lycosa9527
@made_by MindSpring Team
"""

import re
from typing import List, Tuple

HEX_COLOR_PATTERN = re.compile(r'^#?([a-fA-F\d]{2})([a-fA-F\d]{2})([a-fA-F\d]{2})$')


def is_hex_color(value: str) -> bool:
    """Return True for 6-digit hex colors, with or without the leading '#'."""
    return bool(isinstance(value, str) and HEX_COLOR_PATTERN.match(value))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert a hex color to RGB values.

    Args:
        hex_color: Hex color string (e.g., '#FF0000')

    Returns:
        Tuple of (r, g, b) values in 0-255

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = HEX_COLOR_PATTERN.match(hex_color or '')
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB values (0-255, rounded) to a lowercase '#rrggbb' string."""
    return '#' + ''.join(f"{max(0, min(255, int(c + 0.5))):02x}" for c in (r, g, b))


def calculate_average_color(hex_colors: List[str]) -> str:
    """
    Calculate the average color of several hex colors.

    A single color is returned unchanged.

    Raises:
        ValueError: If the list is empty or any color is invalid
    """
    if not hex_colors:
        raise ValueError("At least one color is required")

    if len(hex_colors) == 1:
        hex_to_rgb(hex_colors[0])
        return hex_colors[0]

    rgb_colors = [hex_to_rgb(color) for color in hex_colors]
    count = len(rgb_colors)
    avg_r = sum(color[0] for color in rgb_colors) / count
    avg_g = sum(color[1] for color in rgb_colors) / count
    avg_b = sum(color[2] for color in rgb_colors) / count
    return rgb_to_hex(avg_r, avg_g, avg_b)
