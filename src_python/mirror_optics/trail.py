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
Fading trail of recently traced angles.

The trail only remembers launch angles and when they were recorded. Paths
are re-derived from the simulator whenever they are drawn, so the trail
never holds geometry of its own.
"""

from collections import deque

from .constants import TRAIL_MAX_ENTRIES

# Stepper increments offered for fine angle adjustment (degrees)
ANGLE_STEPS = (1, 0.1, 0.01, 0.001, 0.0001)


def step_angle(angle, delta):
    """
    Adjust an angle by `delta` degrees, wrapped into [0, 360).

    Args:
        angle (float): Current angle in degrees
        delta (float): Increment, positive or negative

    Returns:
        float
    """
    return (angle + delta + 360) % 360


class TrailEntry:
    """
    A recorded launch angle.

    Attributes:
        angle (float): Launch angle in degrees
        timestamp (int): Frame counter value at which the angle was recorded
    """

    __slots__ = ('angle', 'timestamp')

    def __init__(self, angle, timestamp):
        self.angle = angle
        self.timestamp = timestamp

    def __eq__(self, other):
        if not isinstance(other, TrailEntry):
            return NotImplemented
        return self.angle == other.angle and self.timestamp == other.timestamp

    def __repr__(self):
        return f"TrailEntry(angle={self.angle}, timestamp={self.timestamp})"


class TrailHistory:
    """
    Bounded ring buffer of trail entries, newest first.

    Attributes:
        max_entries (int): Capacity; recording beyond it drops the oldest entry
    """

    def __init__(self, max_entries=TRAIL_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries = deque(maxlen=max_entries)

    def record(self, angle, timestamp):
        """
        Add an entry in front of the trail.

        Args:
            angle (float): Launch angle in degrees
            timestamp (int): Current frame counter

        Returns:
            TrailEntry: The entry that was added
        """
        entry = TrailEntry(angle, timestamp)
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self):
        """Entries, newest first."""
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    @staticmethod
    def opacity(entry, now):
        """
        Stroke opacity for an entry: 0.8 when fresh, rising by 0.02 per
        frame of age up to 1.

        Args:
            entry (TrailEntry): The trail entry
            now (int): Current frame counter

        Returns:
            float
        """
        age = now - entry.timestamp
        return min(1.0, 0.8 + (age / 10) * 0.2)

    def paths(self, simulator, max_bounces=None):
        """
        Re-trace every entry.

        Args:
            simulator (Simulator): Simulator to trace with
            max_bounces (int or None): Bounce cap, or None for the simulator default

        Returns:
            list: (TrailEntry, path) tuples, newest first
        """
        return [(entry, simulator.trace(entry.angle, max_bounces)) for entry in self._entries]
