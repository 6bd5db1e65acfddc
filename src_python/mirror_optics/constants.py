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
Constants used throughout the mirror optics simulation.

These are kept in their own module so that the geometry primitives, the
reflectors and the simulator can share them without circular imports.
"""

import math

# Shared tolerance: excludes self-intersection at the ray origin and marks
# near-parallel ray/segment pairs as non-intersecting
EPSILON = 1e-7

# Maximum number of segments in one traced path
DEFAULT_MAX_BOUNCES = 20

DEG_TO_RAD = math.pi / 180

# Default enclosure layout (pixels)
CANVAS_SIZE = 600
MIRROR_RADIUS = 50
MIRROR_SPACING = 150
MIRROR_ROWS = 3
MIRROR_COLS = 3
WALL_OFFSET = 50

# Trail history
TRAIL_MAX_ENTRIES = 20
