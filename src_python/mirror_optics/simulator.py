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

import logging
import math

from . import geometry
from .constants import DEFAULT_MAX_BOUNCES, DEG_TO_RAD
from .ray import RaySegment

logger = logging.getLogger(__name__)


class Simulator:
    """
    Ray tracing engine for a single ray bouncing inside a scene.

    A traced ray starts at a point, travels in a straight line to the
    nearest reflector, reflects specularly and repeats, until it escapes or
    the bounce cap is reached. Each bounce contributes one RaySegment.

    The simulator keeps no state between calls: the scene is immutable and
    every trace builds its own path, so the same simulator can serve any
    number of callers, including from several threads at once.

    Attributes:
        scene (Scene): The scene containing the reflectors
        max_bounces (int): Default maximum number of segments per path
    """

    def __init__(self, scene, max_bounces=DEFAULT_MAX_BOUNCES):
        """
        Initialize the simulator.

        Args:
            scene (Scene): The scene to trace rays in
            max_bounces (int): Default bounce cap (default: 20)
        """
        self.scene = scene
        self.max_bounces = self._check_max_bounces(max_bounces)

    def trace(self, angle_degrees, max_bounces=None):
        """
        Trace a ray launched from the scene center.

        This is the entry point used by the presentation layer.

        Args:
            angle_degrees (float): Launch angle in degrees, any value; it is
                                   reduced modulo 360
            max_bounces (int or None): Bounce cap, or None for the simulator default

        Returns:
            list: RaySegment objects, in travel order

        Raises:
            ValueError: If the angle is not finite or max_bounces is negative
        """
        if not math.isfinite(angle_degrees):
            raise ValueError(f"Launch angle must be finite, got {angle_degrees}")
        angle = (angle_degrees % 360) * DEG_TO_RAD
        path = self.trace_from(self.scene.center, angle, max_bounces)
        logger.debug("Traced %g deg: %d segments", angle_degrees, len(path))
        return path

    def trace_from(self, start_point, start_angle_radians, max_bounces=None):
        """
        Trace a ray from an arbitrary start point.

        Args:
            start_point (dict): Launch point {'x': float, 'y': float}
            start_angle_radians (float): Launch angle in radians
            max_bounces (int or None): Bounce cap, or None for the simulator default

        Returns:
            list: RaySegment objects, in travel order
        """
        if not math.isfinite(start_angle_radians):
            raise ValueError(f"Launch angle must be finite, got {start_angle_radians}")
        direction = geometry.direction_from_angle(start_angle_radians)
        return self.trace_ray(start_point, direction, max_bounces)

    def trace_ray(self, start_point, direction, max_bounces=None):
        """
        Trace a ray given by a start point and a direction vector.

        The main loop. For each bounce:
        1. Find the nearest intersection with any reflector
        2. Stop if there is none (the ray left the enclosure)
        3. Store the segment from the current position to the hit point
        4. Reflect the direction on the surface normal and move to the hit point

        Args:
            start_point (dict): Launch point {'x': float, 'y': float}
            direction (dict): Launch direction, nonzero; it does not need to
                              be unit length
            max_bounces (int or None): Bounce cap, or None for the simulator default

        Returns:
            list: At most max_bounces RaySegment objects

        Raises:
            ValueError: If the direction is zero or not finite, or max_bounces
                        is negative
        """
        if max_bounces is None:
            max_bounces = self.max_bounces
        else:
            max_bounces = self._check_max_bounces(max_bounces)

        dx = direction['x']
        dy = direction['y']
        if not (math.isfinite(dx) and math.isfinite(dy)):
            raise ValueError(f"Ray direction must be finite, got ({dx}, {dy})")
        if dx * dx + dy * dy == 0:
            raise ValueError(f"Ray direction must be nonzero, got ({dx}, {dy})")

        position = {'x': start_point['x'], 'y': start_point['y']}
        direction = {'x': dx, 'y': dy}
        path = []

        for bounce in range(max_bounces):
            hit = self._find_nearest_intersection(position, direction)
            if hit is None:
                logger.warning(
                    "Ray escaped at (%.6g, %.6g) heading (%.6g, %.6g) after %d segments",
                    position['x'], position['y'], direction['x'], direction['y'], len(path)
                )
                break

            path.append(RaySegment(position, hit.point, bounce=bounce, hit_obj=hit.obj))
            direction = geometry.reflect(direction, hit.normal)
            position = {'x': hit.point['x'], 'y': hit.point['y']}

        return path

    def _find_nearest_intersection(self, origin, direction):
        """
        Find the nearest intersection between a ray and all reflectors.

        Reflectors are tested in scene order and a candidate only replaces
        the current best if its t is strictly smaller, so on an exact tie the
        reflector listed first (mirrors before walls) wins.

        Args:
            origin (dict): Ray start point
            direction (dict): Ray direction

        Returns:
            Intersection or None
        """
        epsilon = self.scene.epsilon
        nearest = None
        for obj in self.scene.reflectors:
            hit = obj.intersect(origin, direction, epsilon)
            if hit is not None and (nearest is None or hit.t < nearest.t):
                nearest = hit
        return nearest

    @staticmethod
    def _check_max_bounces(max_bounces):
        if isinstance(max_bounces, bool) or not isinstance(max_bounces, int):
            raise ValueError(f"max_bounces must be an integer, got {max_bounces!r}")
        if max_bounces < 0:
            raise ValueError(f"max_bounces must be non-negative, got {max_bounces}")
        return max_bounces


def path_points(path):
    """
    Vertices of a path as a polyline.

    Args:
        path (list): RaySegment objects

    Returns:
        list: Point dicts, the start of the first segment followed by the
              end of every segment; empty for an empty path
    """
    if not path:
        return []
    return [path[0].p1] + [segment.p2 for segment in path]
