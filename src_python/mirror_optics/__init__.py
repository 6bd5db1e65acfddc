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
Mirror Optics
=============

Traces a single light ray bouncing between circular mirrors inside a
walled square enclosure.

Quick start:
    from mirror_optics import SceneLayout

    simulator = SceneLayout().build_simulator()
    path = simulator.trace(30.0)
"""

__version__ = "0.1.0"

from .geometry import Intersection, intersect_circle, intersect_segment, reflect
from .ray import RaySegment
from .scene import Scene
from .scene_objs import BaseReflector, CircleMirror, WallSegment
from .simulator import Simulator
from .layout import SceneLayout, default_scene
from .trail import TrailHistory, TrailEntry, step_angle

__all__ = [
    'Intersection', 'intersect_circle', 'intersect_segment', 'reflect',
    'RaySegment',
    'Scene',
    'BaseReflector', 'CircleMirror', 'WallSegment',
    'Simulator',
    'SceneLayout', 'default_scene',
    'TrailHistory', 'TrailEntry', 'step_angle',
    '__version__',
]
