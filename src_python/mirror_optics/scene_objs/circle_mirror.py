"""
Copyright 2024 The Ray Optics Simulation authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from typing import Dict, Optional

from ..constants import EPSILON
from ..geometry import Intersection, intersect_circle
from .base_reflector import BaseReflector


class CircleMirror(BaseReflector):
    """
    Circular (cylindrical) mirror reflecting on its outer surface.

    Attributes:
        center (dict): Center of the circle {'x': float, 'y': float}
        radius (float): Radius of the circle, strictly positive
    """

    type = 'CircleMirror'

    def __init__(self, center, radius):
        if radius <= 0:
            raise ValueError(f"Mirror radius must be positive, got {radius}")
        self._cx = float(center['x'])
        self._cy = float(center['y'])
        self._radius = float(radius)
        self._freeze()

    @property
    def center(self):
        return {'x': self._cx, 'y': self._cy}

    @property
    def radius(self):
        return self._radius

    def intersect(self, origin: Dict[str, float], direction: Dict[str, float],
                  epsilon: float = EPSILON) -> Optional[Intersection]:
        hit = intersect_circle(origin, direction, {'x': self._cx, 'y': self._cy},
                               self._radius, epsilon)
        if hit is not None:
            hit.obj = self
        return hit

    def to_json(self):
        return {'type': self.type, 'center': self.center, 'radius': self._radius}

    def __eq__(self, other):
        if not isinstance(other, CircleMirror):
            return NotImplemented
        return (self._cx, self._cy, self._radius) == (other._cx, other._cy, other._radius)

    def __hash__(self):
        return hash((self.type, self._cx, self._cy, self._radius))

    def __repr__(self):
        return f"CircleMirror(center=({self._cx:g}, {self._cy:g}), radius={self._radius:g})"
