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

"""
Enclosure layout configuration.

A layout describes the square canvas, the grid of circular mirrors around
its center and the inset square of walls. It is read once at startup and
turned into an immutable Scene.
"""

import copy
import logging
import math
import numbers

from . import constants
from .scene import Scene
from .scene_objs import CircleMirror, WallSegment
from .simulator import Simulator

logger = logging.getLogger(__name__)


class SceneLayout:
    """
    Configuration of the mirror enclosure.

    Attributes:
        canvas_size (float): Width and height of the square canvas
        mirror_rows (int): Number of mirror rows in the grid
        mirror_cols (int): Number of mirror columns in the grid
        mirror_spacing (float): Distance between neighbouring mirror centers
        mirror_radius (float): Radius of every mirror
        wall_offset (float): Inset of the wall square from the canvas edges
        skip_center (bool): Leave the center grid cell empty (the launch point)
        epsilon (float): Intersection tolerance shared by the whole scene
        max_bounces (int): Default bounce cap of simulators built from this layout
    """

    serializable_defaults = {
        'canvas_size': constants.CANVAS_SIZE,
        'mirror_rows': constants.MIRROR_ROWS,
        'mirror_cols': constants.MIRROR_COLS,
        'mirror_spacing': constants.MIRROR_SPACING,
        'mirror_radius': constants.MIRROR_RADIUS,
        'wall_offset': constants.WALL_OFFSET,
        'skip_center': True,
        'epsilon': constants.EPSILON,
        'max_bounces': constants.DEFAULT_MAX_BOUNCES
    }

    def __init__(self, json_obj=None, **kwargs):
        """
        Initialize the layout from defaults, overridden by `json_obj` then `kwargs`.

        Args:
            json_obj (dict or None): Serialized layout properties
            **kwargs: Individual property overrides

        Raises:
            ValueError: If a key is unknown or the resulting layout is invalid
        """
        if json_obj is not None and not isinstance(json_obj, dict):
            raise ValueError(
                f"Layout must be a mapping of properties, got {type(json_obj).__name__}"
            )
        values = copy.deepcopy(self.serializable_defaults)
        for source in (json_obj or {}, kwargs):
            for key, value in source.items():
                if key not in self.serializable_defaults:
                    raise ValueError(f"Unknown layout property: {key!r}")
                values[key] = value

        for key, value in values.items():
            setattr(self, key, value)

        self.validate()

    @property
    def center(self):
        half = self.canvas_size / 2
        return {'x': half, 'y': half}

    def validate(self):
        """
        Check that the layout describes a closed enclosure.

        Every mirror must lie strictly inside the walls, neighbouring mirrors
        must neither overlap nor touch (2 * radius < spacing), and the launch
        point must be outside all mirrors.

        Raises:
            ValueError: Describing the first problem found
        """
        for key in ('canvas_size', 'wall_offset', 'mirror_spacing', 'mirror_radius', 'epsilon'):
            value = getattr(self, key)
            if (isinstance(value, bool) or not isinstance(value, numbers.Real)
                    or not math.isfinite(value)):
                raise ValueError(f"{key} must be a finite number, got {value!r}")
        if not isinstance(self.skip_center, bool):
            raise ValueError(f"skip_center must be a boolean, got {self.skip_center!r}")
        if self.canvas_size <= 0:
            raise ValueError(f"canvas_size must be positive, got {self.canvas_size}")
        if self.wall_offset < 0 or 2 * self.wall_offset >= self.canvas_size:
            raise ValueError(
                f"wall_offset must be in [0, canvas_size / 2), got {self.wall_offset}"
            )
        for key in ('mirror_rows', 'mirror_cols'):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
        if self.mirror_radius <= 0:
            raise ValueError(f"mirror_radius must be positive, got {self.mirror_radius}")
        if self.mirror_spacing <= 0:
            raise ValueError(f"mirror_spacing must be positive, got {self.mirror_spacing}")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if (not isinstance(self.max_bounces, int) or isinstance(self.max_bounces, bool)
                or self.max_bounces < 0):
            raise ValueError(
                f"max_bounces must be a non-negative integer, got {self.max_bounces!r}"
            )

        centers = self.mirror_centers()
        if len(centers) > 1 and 2 * self.mirror_radius >= self.mirror_spacing:
            raise ValueError(
                f"Mirrors touch or overlap: radius {self.mirror_radius} "
                f"with spacing {self.mirror_spacing}"
            )

        low = self.wall_offset
        high = self.canvas_size - self.wall_offset
        r = self.mirror_radius
        for c in centers:
            if not (low < c['x'] - r and c['x'] + r < high and
                    low < c['y'] - r and c['y'] + r < high):
                raise ValueError(
                    f"Mirror at ({c['x']:g}, {c['y']:g}) is not inside the walls "
                    f"[{low:g}, {high:g}]"
                )

        launch = self.center
        for c in centers:
            dx = launch['x'] - c['x']
            dy = launch['y'] - c['y']
            if dx * dx + dy * dy <= r * r:
                raise ValueError(
                    f"Launch point ({launch['x']:g}, {launch['y']:g}) lies inside the "
                    f"mirror at ({c['x']:g}, {c['y']:g})"
                )

    def mirror_centers(self):
        """
        Centers of the mirror grid, row by row.

        The grid is centered on the canvas. With `skip_center` the middle
        cell of an odd-sized grid is left empty.

        Returns:
            list: Point dicts
        """
        half = self.canvas_size / 2
        row_mid = (self.mirror_rows - 1) / 2
        col_mid = (self.mirror_cols - 1) / 2
        centers = []
        for row in range(self.mirror_rows):
            for col in range(self.mirror_cols):
                if self.skip_center and row == row_mid and col == col_mid:
                    continue
                centers.append({
                    'x': half + (col - col_mid) * self.mirror_spacing,
                    'y': half + (row - row_mid) * self.mirror_spacing
                })
        return centers

    def wall_endpoints(self):
        """
        End points of the four walls, chained clockwise (in screen coordinates)
        from the top-left corner.

        Returns:
            list: (p1, p2) tuples of point dicts
        """
        low = self.wall_offset
        high = self.canvas_size - self.wall_offset
        corners = [
            {'x': low, 'y': low},
            {'x': high, 'y': low},
            {'x': high, 'y': high},
            {'x': low, 'y': high}
        ]
        return [(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def build_scene(self):
        """
        Construct the immutable scene described by this layout.

        Returns:
            Scene
        """
        mirrors = [CircleMirror(c, self.mirror_radius) for c in self.mirror_centers()]
        walls = [WallSegment(p1, p2) for p1, p2 in self.wall_endpoints()]
        logger.debug("Built scene with %d mirrors and %d walls", len(mirrors), len(walls))
        return Scene(mirrors, walls, self.center, self.canvas_size, self.canvas_size,
                     epsilon=self.epsilon)

    def build_simulator(self):
        """
        Construct a simulator over a freshly built scene.

        Returns:
            Simulator using this layout's bounce cap
        """
        return Simulator(self.build_scene(), max_bounces=self.max_bounces)

    def to_json(self):
        """
        Serialize the layout, keeping only properties that differ from the defaults.

        Returns:
            dict
        """
        return {
            key: getattr(self, key)
            for key, default in self.serializable_defaults.items()
            if getattr(self, key) != default
        }

    def __repr__(self):
        return f"SceneLayout({self.to_json()})"


def default_scene():
    """Scene of the default 3x3 enclosure (center cell empty)."""
    return SceneLayout().build_scene()
