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
Geometry primitives for the mirror optics simulation.

Points and vectors are plain dicts with 'x' and 'y' keys. A ray is an
origin point plus a direction vector; the direction does not have to be
unit length, the parameter t of every intersection is expressed in units
of that direction.
"""

import math
from typing import Dict, Optional

from .constants import EPSILON


def dot(v1: Dict[str, float], v2: Dict[str, float]) -> float:
    """Dot product of two vectors."""
    return v1['x'] * v2['x'] + v1['y'] * v2['y']


def length(v: Dict[str, float]) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v['x'], v['y'])


def direction_from_angle(angle: float) -> Dict[str, float]:
    """
    Unit direction vector for an angle.

    Args:
        angle: Angle in radians, measured from the +x axis towards +y.

    Returns:
        Unit vector dict
    """
    return {'x': math.cos(angle), 'y': math.sin(angle)}


class Intersection:
    """
    A hit between a ray and a reflector.

    Attributes:
        point (dict): Hit location {'x': float, 'y': float}
        t (float): Ray parameter of the hit (origin + t * direction)
        normal (dict): Unit normal of the surface at the hit point
        s (float or None): Segment parameter in [0, 1] for segment hits,
                           None for circle hits
        obj (object or None): The reflector that was hit, filled in by the
                              reflector that produced this intersection
    """

    __slots__ = ('point', 't', 'normal', 's', 'obj')

    def __init__(self, point, t, normal, s=None, obj=None):
        self.point = point
        self.t = t
        self.normal = normal
        self.s = s
        self.obj = obj

    def __repr__(self):
        return (f"Intersection(point=({self.point['x']:.6g}, {self.point['y']:.6g}), "
                f"t={self.t:.6g}, normal=({self.normal['x']:.6g}, {self.normal['y']:.6g}), "
                f"s={self.s})")


def intersect_circle(origin: Dict[str, float], direction: Dict[str, float],
                     center: Dict[str, float], radius: float,
                     epsilon: float = EPSILON) -> Optional[Intersection]:
    """
    Intersect a ray with a circle.

    Solves |origin + t * direction - center|^2 = radius^2 for t and keeps
    the smallest root greater than epsilon, so a ray starting on the circle
    does not hit it again at its own origin. A tangent ray resolves to the
    repeated root.

    Args:
        origin: Ray start point
        direction: Ray direction (any nonzero length)
        center: Circle center
        radius: Circle radius, must be positive
        epsilon: Minimum accepted ray parameter

    Returns:
        Intersection with the outward unit normal, or None if the ray
        misses the circle or only meets it behind its origin
    """
    if radius <= 0:
        raise ValueError(f"Circle radius must be positive, got {radius}")

    fx = origin['x'] - center['x']
    fy = origin['y'] - center['y']
    a = direction['x'] * direction['x'] + direction['y'] * direction['y']
    b = 2 * (fx * direction['x'] + fy * direction['y'])
    c = fx * fx + fy * fy - radius * radius
    if a == 0:
        return None

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    t1 = (-b - sqrt_disc) / (2 * a)
    t2 = (-b + sqrt_disc) / (2 * a)
    if t1 > epsilon:
        t = t1
    elif t2 > epsilon:
        t = t2
    else:
        return None

    hit_x = origin['x'] + direction['x'] * t
    hit_y = origin['y'] + direction['y'] * t
    normal = {
        'x': (hit_x - center['x']) / radius,
        'y': (hit_y - center['y']) / radius
    }
    return Intersection({'x': hit_x, 'y': hit_y}, t, normal)


def intersect_segment(origin: Dict[str, float], direction: Dict[str, float],
                      p1: Dict[str, float], p2: Dict[str, float],
                      epsilon: float = EPSILON) -> Optional[Intersection]:
    """
    Intersect a ray with a line segment.

    Solves origin + t * direction = p1 + s * (p2 - p1). Rays parallel to the
    segment (|det| < epsilon) never intersect it. Endpoints count as part of
    the segment.

    The normal is the segment direction rotated by 90 degrees. Which side it
    faces depends only on the order of p1 and p2, not on the ray.

    Args:
        origin: Ray start point
        direction: Ray direction (any nonzero length)
        p1: First endpoint of the segment
        p2: Second endpoint of the segment
        epsilon: Minimum accepted ray parameter and determinant magnitude

    Returns:
        Intersection with s set to the segment parameter, or None
    """
    vx = p2['x'] - p1['x']
    vy = p2['y'] - p1['y']
    wx = origin['x'] - p1['x']
    wy = origin['y'] - p1['y']

    det = direction['x'] * vy - direction['y'] * vx
    if abs(det) < epsilon:
        return None

    t = (vx * wy - vy * wx) / det
    s = (direction['x'] * wy - direction['y'] * wx) / det
    if t <= epsilon or s < 0 or s > 1:
        return None

    seg_len = math.hypot(vx, vy)
    hit = {
        'x': origin['x'] + direction['x'] * t,
        'y': origin['y'] + direction['y'] * t
    }
    normal = {'x': -vy / seg_len, 'y': vx / seg_len}
    return Intersection(hit, t, normal, s=s)


def reflect(direction: Dict[str, float], normal: Dict[str, float]) -> Dict[str, float]:
    """
    Specular reflection r = d - 2 (d . n) n.

    Args:
        direction: Incident direction
        normal: Unit surface normal (either facing)

    Returns:
        Reflected direction with the same magnitude as `direction`
    """
    d_dot_n = dot(direction, normal)
    return {
        'x': direction['x'] - 2 * d_dot_n * normal['x'],
        'y': direction['y'] - 2 * d_dot_n * normal['y']
    }

