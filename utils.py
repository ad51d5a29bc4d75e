import numpy as np

def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def dot(a, b):
    return float(np.dot(a, b))

def normalize(v):
    """Return a unit vector in the direction of the vector v.

    The caller guarantees v is not the zero vector.
    """
    return v / np.linalg.norm(v)


def color(r, g, b):
    """Make an 8-bit-per-channel RGB color."""
    return np.array([r, g, b], dtype=np.uint8)

def scale_color(c, k):
    """Scale each channel of the color c by the non-negative scalar k.

    Channels saturate at 255 and are truncated toward zero, so the result
    never wraps around.
    """
    scaled = np.minimum(np.asarray(c, dtype=np.float64) * k, 255.0)
    return scaled.astype(np.uint8)


def parse_triple(text, convert=float):
    """Parse a comma separated triple like "255,255,255".

    Returns a tuple of three values converted with `convert`.
    Raises ValueError when the text does not hold exactly three values.
    """
    parts = [p.strip() for p in text.split(',')]
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"expected three comma separated values, got {text!r}")
    return tuple(convert(p) for p in parts)
