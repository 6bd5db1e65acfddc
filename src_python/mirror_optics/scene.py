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

from .constants import EPSILON


class Scene:
    """
    Fixed set of reflectors a ray can hit.

    The scene is built once, from a layout, and never changes afterwards:
    the mirror and wall collections are stored as tuples and there are no
    methods that add or remove objects. Any number of simulators may read
    the same scene at the same time.

    Attributes:
        circle_mirrors (tuple): Circular mirrors, in construction order
        wall_segments (tuple): Boundary walls, in construction order
        reflectors (tuple): Mirrors followed by walls; the simulator tests
                            them in this order
        center (dict): Launch point of traced rays
        width (float): Canvas width
        height (float): Canvas height
        epsilon (float): Tolerance shared by every intersection test
    """

    def __init__(self, circle_mirrors, wall_segments, center, width, height, epsilon=EPSILON):
        """
        Initialize the scene.

        Args:
            circle_mirrors (iterable): CircleMirror objects
            wall_segments (iterable): WallSegment objects
            center (dict): Launch point {'x': float, 'y': float}
            width (float): Canvas width
            height (float): Canvas height
            epsilon (float): Intersection tolerance (default: EPSILON)
        """
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        self._circle_mirrors = tuple(circle_mirrors)
        self._wall_segments = tuple(wall_segments)
        self._reflectors = self._circle_mirrors + self._wall_segments
        self._center = (float(center['x']), float(center['y']))
        self._width = width
        self._height = height
        self._epsilon = epsilon

    @property
    def circle_mirrors(self):
        return self._circle_mirrors

    @property
    def wall_segments(self):
        return self._wall_segments

    @property
    def reflectors(self):
        return self._reflectors

    @property
    def center(self):
        return {'x': self._center[0], 'y': self._center[1]}

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def epsilon(self):
        return self._epsilon

    def bounds(self):
        """
        Bounding box of the walls.

        Returns:
            tuple: (min_x, min_y, max_x, max_y), or None if the scene has no walls
        """
        if not self._wall_segments:
            return None
        xs = []
        ys = []
        for wall in self._wall_segments:
            xs.extend((wall.p1['x'], wall.p2['x']))
            ys.extend((wall.p1['y'], wall.p2['y']))
        return (min(xs), min(ys), max(xs), max(ys))

    def contains(self, point, tolerance=None):
        """
        Check whether a point lies inside the wall bounding box.

        Args:
            point (dict): Point to test
            tolerance (float or None): Slack on every side (default: epsilon scaled
                                       to the canvas size)

        Returns:
            bool: True if inside or on the boundary
        """
        box = self.bounds()
        if box is None:
            return True
        if tolerance is None:
            tolerance = self._epsilon * max(self._width, self._height)
        min_x, min_y, max_x, max_y = box
        return (min_x - tolerance <= point['x'] <= max_x + tolerance and
                min_y - tolerance <= point['y'] <= max_y + tolerance)

    def to_json(self):
        """Serialize the scene geometry to a JSON-compatible dict."""
        return {
            'width': self._width,
            'height': self._height,
            'center': self.center,
            'epsilon': self._epsilon,
            'objs': [obj.to_json() for obj in self._reflectors]
        }

    def __repr__(self):
        return (f"Scene({len(self._circle_mirrors)} mirrors, "
                f"{len(self._wall_segments)} walls, {self._width}x{self._height})")
