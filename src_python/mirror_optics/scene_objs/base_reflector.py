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
from ..geometry import Intersection


class BaseReflector:
    """
    Base class for every shape that stops and redirects a ray.

    Subclasses implement `intersect`, the only operation the simulator needs.
    Reflectors are immutable once constructed: their geometry is stored in
    private attributes and exposed through read-only properties, and the
    point dicts they return are fresh copies.
    """

    type: str = ''
    """The type of the reflector."""

    def intersect(self, origin: Dict[str, float], direction: Dict[str, float],
                  epsilon: float = EPSILON) -> Optional[Intersection]:
        """
        Find where a ray first hits this reflector.

        Args:
            origin: Ray start point
            direction: Ray direction (nonzero)
            epsilon: Minimum accepted ray parameter

        Returns:
            Intersection with `obj` set to this reflector, or None
        """
        raise NotImplementedError

    def to_json(self) -> Dict:
        """Serialize the reflector geometry to a JSON-compatible dict."""
        raise NotImplementedError

    def __setattr__(self, name, value):
        if hasattr(self, '_frozen'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def _freeze(self):
        object.__setattr__(self, '_frozen', True)
