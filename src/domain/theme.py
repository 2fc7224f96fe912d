"""
Theme helpers

Tenant brand colours are stored as hex and applied to the site theme as
"H S% L%" strings (CSS custom property format).
"""

from typing import Dict, Optional


def hex_to_hsl(hex_color: str) -> str:
    """
    Convert "#rrggbb" (leading # optional) to "H S% L%".

    Raises:
        ValueError: if the value is not a 6-digit hex colour
    """
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex colour: {hex_color}")

    r = int(value[0:2], 16) / 255
    g = int(value[2:4], 16) / 255
    b = int(value[4:6], 16) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    h = s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return f"{round(h * 360)} {round(s * 100)}% {round(lightness * 100)}%"


def theme_variables(
    primary: Optional[str], secondary: Optional[str], accent: Optional[str]
) -> Dict[str, str]:
    """CSS variables for the configured colours; unset or invalid colours are skipped"""
    variables = {}
    for name, color in (("--primary", primary), ("--secondary", secondary), ("--accent", accent)):
        if not color:
            continue
        try:
            variables[name] = hex_to_hsl(color)
        except ValueError:
            continue
    if "--primary" in variables:
        variables["--primary-hover"] = variables["--primary"]
    return variables
