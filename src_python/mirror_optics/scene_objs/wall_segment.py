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
from ..geometry import Intersection, intersect_segment
from .base_reflector import BaseReflector


class WallSegment(BaseReflector):
    """
    Straight reflecting wall between two end points.

    The walls of an enclosure are chained end to end to form a closed
    boundary around every mirror.

    Attributes:
        p1 (dict): The first endpoint
        p2 (dict): The second endpoint
    """

    type = 'WallSegment'

    def __init__(self, p1, p2):
        if p1['x'] == p2['x'] and p1['y'] == p2['y']:
            raise ValueError(f"Wall segment end points coincide at ({p1['x']}, {p1['y']})")
        self._x1 = float(p1['x'])
        self._y1 = float(p1['y'])
        self._x2 = float(p2['x'])
        self._y2 = float(p2['y'])
        self._freeze()

    @property
    def p1(self):
        return {'x': self._x1, 'y': self._y1}

    @property
    def p2(self):
        return {'x': self._x2, 'y': self._y2}

    def intersect(self, origin: Dict[str, float], direction: Dict[str, float],
                  epsilon: float = EPSILON) -> Optional[Intersection]:
        hit = intersect_segment(origin, direction,
                                {'x': self._x1, 'y': self._y1},
                                {'x': self._x2, 'y': self._y2},
                                epsilon)
        if hit is not None:
            hit.obj = self
        return hit

    def to_json(self):
        return {'type': self.type, 'p1': self.p1, 'p2': self.p2}

    def __eq__(self, other):
        if not isinstance(other, WallSegment):
            return NotImplemented
        return ((self._x1, self._y1, self._x2, self._y2)
                == (other._x1, other._y1, other._x2, other._y2))

    def __hash__(self):
        return hash((self.type, self._x1, self._y1, self._x2, self._y2))

    def __repr__(self):
        return (f"WallSegment(p1=({self._x1:g}, {self._y1:g}), "
                f"p2=({self._x2:g}, {self._y2:g}))")
