# core/uv.py
from typing import NamedTuple


class UV(NamedTuple):
    """Surface texture coordinates, nominally in [0, 1]^2."""
    u: float
    v: float
