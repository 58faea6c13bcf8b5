# geometry/bvh.py
import logging
import random
from typing import Iterator, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import EmptyGeometryError
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode(Hittable):
    """
    Interior node of a bounding volume hierarchy. Owns exactly two children,
    each a primitive or another BVHNode, and caches the box enclosing both.
    Never mutated after construction.
    """
    def __init__(self, left: Hittable, right: Hittable):
        self.left = left
        self.right = right
        self.box = AABB.surrounding_box(left.bounding_box(), right.bounding_box())

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # The right subtree may only report something closer than the left hit.
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def children(self):
        return self.left, self.right

    def __repr__(self) -> str:
        return f"BVHNode(box={self.box})"


def _build(objects: list) -> Hittable:
    axis = random.randrange(3)
    objects.sort(key=lambda obj: obj.bounding_box().minimum[axis])

    if len(objects) == 1:
        return objects[0]
    if len(objects) == 2:
        return BVHNode(objects[0], objects[1])

    mid = len(objects) // 2
    return BVHNode(_build(objects[:mid]), _build(objects[mid:]))


def build_bvh(objects: Sequence[Hittable]) -> Hittable:
    """
    Builds a BVH over `objects` by sorting along a randomly chosen axis and
    splitting at the median. A single primitive is returned as is.

    Raises EmptyGeometryError when `objects` is empty.
    """
    if len(objects) == 0:
        raise EmptyGeometryError("cannot build a BVH from an empty object list")
    root = _build(list(objects))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built BVH over %d primitives: %d nodes, depth %d",
                     len(objects), count_nodes(root), tree_depth(root))
    return root


def iter_nodes(root: Hittable) -> Iterator[BVHNode]:
    """Yields every BVHNode reachable from root, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, BVHNode):
            yield node
            stack.append(node.right)
            stack.append(node.left)


def count_nodes(root: Hittable) -> int:
    return sum(1 for _ in iter_nodes(root))


def tree_depth(root: Hittable) -> int:
    """Number of BVHNode levels on the longest root-to-leaf path."""
    if not isinstance(root, BVHNode):
        return 0
    return 1 + max(tree_depth(root.left), tree_depth(root.right))
