"""Diverging colour scale for correlation coefficients: -1 deep blue, 0 white, +1 deep red."""

COLOR_STOPS = [
    (-1.0, '#2563eb'),
    (-0.5, '#93c5fd'),
    (0.0, '#ffffff'),
    (0.5, '#fca5a5'),
    (1.0, '#dc2626'),
]
DIAGONAL_COLOR = '#f8fafc'
DARK_TEXT = '#1e293b'
LIGHT_TEXT = '#ffffff'


def _hex_to_rgb(color):
    color = color.lstrip('#')
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def _rgb_to_hex(rgb):
    return '#' + ''.join(f"{channel:02x}" for channel in rgb)


def correlation_color(value):
    """Background colour for a coefficient, linearly interpolated between COLOR_STOPS."""
    value = min(1.0, max(-1.0, float(value)))
    for (lo, lo_color), (hi, hi_color) in zip(COLOR_STOPS, COLOR_STOPS[1:]):
        if value <= hi:
            t = (value - lo) / (hi - lo)
            lo_rgb = _hex_to_rgb(lo_color)
            hi_rgb = _hex_to_rgb(hi_color)
            return _rgb_to_hex(
                round(a + (b - a) * t) for a, b in zip(lo_rgb, hi_rgb)
            )
    return COLOR_STOPS[-1][1]


def text_color(value):
    """White text on strongly coloured cells (|r| > 0.5), dark text otherwise."""
    return LIGHT_TEXT if abs(value) > 0.5 else DARK_TEXT
