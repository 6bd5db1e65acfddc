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

import math


class RaySegment:
    """
    One leg of a traced ray path.

    A segment runs from the point where the ray was launched (or last
    reflected) to the point where it hits the next reflector. The ordered
    list of segments for one launch angle is the path.

    Attributes:
        p1 (dict): Starting point with keys 'x' and 'y'
        p2 (dict): End point (the hit point) with keys 'x' and 'y'
        bounce (int): Index of this segment within its path
        hit_obj (object or None): The reflector that ends this segment
    """

    def __init__(self, p1, p2, bounce=0, hit_obj=None):
        """
        Initialize a ray segment.

        Args:
            p1 (dict): Starting point {'x': float, 'y': float}
            p2 (dict): End point {'x': float, 'y': float}
            bounce (int): Index of the segment in its path (default: 0)
            hit_obj (object or None): Reflector hit at p2 (default: None)
        """
        self.p1 = p1
        self.p2 = p2
        self.bounce = bounce
        self.hit_obj = hit_obj

    @property
    def length(self):
        """Euclidean length of the segment."""
        return math.hypot(self.p2['x'] - self.p1['x'], self.p2['y'] - self.p1['y'])

    @property
    def direction(self):
        """
        Unit direction of travel along this segment.

        Returns:
            dict: {'x': float, 'y': float}, or a zero vector for a degenerate segment
        """
        seg_len = self.length
        if seg_len == 0:
            return {'x': 0.0, 'y': 0.0}
        return {
            'x': (self.p2['x'] - self.p1['x']) / seg_len,
            'y': (self.p2['y'] - self.p1['y']) / seg_len
        }

    def __eq__(self, other):
        if not isinstance(other, RaySegment):
            return NotImplemented
        return (self.p1 == other.p1 and self.p2 == other.p2
                and self.bounce == other.bounce)

    def __repr__(self):
        """String representation for debugging."""
        return (f"RaySegment(#{self.bounce}: ({self.p1['x']:.4f}, {self.p1['y']:.4f}) -> "
                f"({self.p2['x']:.4f}, {self.p2['y']:.4f}))")
