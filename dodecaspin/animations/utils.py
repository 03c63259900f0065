import math
from collections import namedtuple

# channels are floats in 0..1
Color = namedtuple("Color", ("r", "g", "b", "a"))

def hsv_to_rgb(h, s, v):
    """Convert a hue/saturation/value triple to an opaque Color.

    Hue is cyclic: 0 and 1 are both red, 1/3 green, 2/3 blue. Callers wrap
    the hue into [0, 1) themselves.
    """
    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    i = int(i) % 6
    if i == 0: return Color(v, t, p, 1.0)
    if i == 1: return Color(q, v, p, 1.0)
    if i == 2: return Color(p, v, t, 1.0)
    if i == 3: return Color(p, q, v, 1.0)
    if i == 4: return Color(t, p, v, 1.0)
    if i == 5: return Color(v, p, q, 1.0)
    return Color(0.0, 0.0, 0.0, 1.0)

def to_rgb255(color):
    r = max(0, min(255, int(color.r * 255.0 + 0.5)))
    g = max(0, min(255, int(color.g * 255.0 + 0.5)))
    b = max(0, min(255, int(color.b * 255.0 + 0.5)))
    return r, g, b

def to_pen(graphics, color):
    return graphics.create_pen(*to_rgb255(color))
