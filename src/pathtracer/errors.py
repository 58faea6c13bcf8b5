# errors.py
"""Exception types raised while building scenes.

Two classes of failure exist. Programmer errors (an empty container, a BVH
over nothing) mean the scene itself is malformed and are not meant to be
caught. Construction errors are raised for bad user-supplied parameters and
may be handled by whoever assembles the scene.
"""


class PathTracerError(Exception):
    """Base class for every error raised by this package."""


class EmptyGeometryError(PathTracerError, RuntimeError):
    """A container or acceleration structure was given no primitives."""


class SceneConstructionError(PathTracerError, ValueError):
    """A primitive was requested with parameters that cannot describe it."""


class NotAxisAlignedError(SceneConstructionError):
    """Rectangle corners do not share the coordinate of the rectangle's fixed axis."""

    def __init__(self, kind: str, axis: str, first: float, second: float):
        super().__init__(
            f"{kind} corners must share the same {axis} coordinate, got {first} and {second}"
        )
        self.kind = kind
        self.axis = axis
        self.first = first
        self.second = second


class InvalidOrientationError(SceneConstructionError):
    """A rectangle orientation other than +1 (outward) or -1 (inward)."""

    def __init__(self, orientation):
        super().__init__(f"orientation must be exactly 1 or -1, got {orientation!r}")
        self.orientation = orientation
