"""Bounding volume hierarchy over hittable objects."""

from __future__ import annotations

from typing import MutableSequence

from .aabb import AABB, surrounding_box
from .hittable import HitRecord, Hittable, HittableList
from .ray import Ray
from .utility import random_int


def _box_of(obj: Hittable) -> AABB:
    return obj.bounding_box(0.0, 0.0) or AABB()


def box_compare(a: Hittable, b: Hittable, axis: int) -> bool:
    """Return whether a's box starts before b's box along the given axis."""
    return _box_of(a).minimum[axis] < _box_of(b).minimum[axis]


class BvhNode(Hittable):
    """A binary tree of bounding boxes that prunes ray tests.

    Building the tree sorts the given object sequence in place along a
    randomly chosen axis.
    """

    handle = 0

    def __init__(
        self,
        objects: HittableList | MutableSequence[Hittable],
        start: int = 0,
        end: int | None = None,
        time0: float = 0.0,
        time1: float = 0.0,
    ) -> None:
        items = objects.objects if isinstance(objects, HittableList) else objects
        if end is None:
            end = len(items)
        span = end - start
        if span <= 0:
            raise ValueError("cannot build a BVH over no objects")

        axis = random_int(0, 2)
        if span == 1:
            self.left = self.right = items[start]
        elif span == 2:
            first, second = items[start], items[start + 1]
            if box_compare(first, second, axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            items[start:end] = sorted(items[start:end], key=lambda obj: _box_of(obj).minimum[axis])
            mid = start + span // 2
            self.left = BvhNode(items, start, mid, time0, time1)
            self.right = BvhNode(items, mid, end, time0, time1)

        box_left = self.left.bounding_box(time0, time1) or AABB()
        box_right = self.right.bounding_box(time0, time1) or AABB()
        self.box = surrounding_box(box_left, box_right)

    def hit(self, ray: Ray, t_min: float, t_max: float, skip_handle: int = -1) -> HitRecord | None:
        """Test both children; a hit on the right child takes precedence."""
        if not self.box.hit(ray, t_min, t_max):
            return None
        left = self.left.hit(ray, t_min, t_max, -1)
        right = self.right.hit(ray, t_min, t_max, -1)
        return right if right is not None else left

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.box