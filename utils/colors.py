def hex_to_rgba(color: str) -> tuple[int, int, int, int]:
    """Parse '#RRGGBB' or '#RRGGBBAA' into an (r, g, b, a) tuple of 0-255 ints."""
    value = color.lstrip("#")
    if len(value) not in (6, 8):
        raise ValueError(f"Unsupported color value: {color!r}")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    a = int(value[6:8], 16) if len(value) == 8 else 255
    return r, g, b, a


def rgba_to_float(color: str) -> tuple[float, float, float, float]:
    """Same as hex_to_rgba, scaled to 0.0-1.0 for matplotlib."""
    return tuple(c / 255 for c in hex_to_rgba(color))


def with_alpha(color: str, alpha: float) -> str:
    """Scale the color's alpha channel, e.g. '#FF8A65', 0.7 → '#FF8A65B2'."""
    r, g, b, a = hex_to_rgba(color)
    scaled = int(a * alpha)
    return f"#{r:02X}{g:02X}{b:02X}{max(0, min(255, scaled)):02X}"


def blend_over(color: str, background: str) -> str:
    """Flatten a translucent color onto an opaque background → '#RRGGBB'."""
    r, g, b, a = hex_to_rgba(color)
    br, bg, bb, _ = hex_to_rgba(background)
    k = a / 255
    mixed = (round(r * k + br * (1 - k)), round(g * k + bg * (1 - k)), round(b * k + bb * (1 - k)))
    return "#{:02X}{:02X}{:02X}".format(*mixed)
