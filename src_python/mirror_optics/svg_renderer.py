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

import svgwrite


class SVGRenderer:
    """
    SVG renderer for the mirror enclosure and traced ray paths.

    The SVG is organized into layers, bottom to top:
    - objects: Mirrors and walls
    - trail: Faded re-traced paths of recent angles
    - rays: The live path
    - labels: Text annotations

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height)
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    def __init__(self, width=600, height=600, viewbox=None):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 600)
            height (int): Canvas height in pixels (default: 600)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height)
                                    If None, uses (0, 0, width, height)
        """
        self.width = width
        self.height = height
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # profile='tiny' keeps svgwrite's validation permissive
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'), profile='tiny')
        self.dwg.viewbox(*self.viewbox)

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        self.layer_objects = self.dwg.add(self.dwg.g(id='objects'))
        self.layer_trail = self.dwg.add(self.dwg.g(id='trail'))
        self.layer_rays = self.dwg.add(self.dwg.g(id='rays'))
        self.layer_labels = self.dwg.add(self.dwg.g(id='labels'))

    @classmethod
    def for_scene(cls, scene):
        """Create a renderer sized to a scene's canvas."""
        return cls(width=scene.width, height=scene.height)

    def draw_scene(self, scene):
        """
        Draw every mirror and wall of a scene.

        Args:
            scene (Scene): The scene to draw
        """
        for mirror in scene.circle_mirrors:
            self.draw_circle(mirror.center, mirror.radius)
        for wall in scene.wall_segments:
            self.draw_line_segment(wall.p1, wall.p2)

    def draw_circle(self, center, radius, color='black', stroke_width=1):
        """
        Draw a circle outline (a circular mirror).

        Args:
            center (dict): Center with 'x' and 'y' keys
            radius (float): Radius
            color (str): Stroke color (default: 'black')
            stroke_width (float): Line width in pixels (default: 1)
        """
        circle = self.dwg.circle(
            center=(center['x'], center['y']),
            r=radius,
            stroke=color,
            stroke_width=stroke_width,
            fill='none'
        )
        self.layer_objects.add(circle)

    def draw_line_segment(self, p1, p2, color='gray', stroke_width=2):
        """
        Draw a line segment (a wall).

        Args:
            p1 (dict): Start point with 'x' and 'y' keys
            p2 (dict): End point with 'x' and 'y' keys
            color (str): Stroke color (default: 'gray')
            stroke_width (float): Line width in pixels (default: 2)
        """
        line = self.dwg.line(
            start=(p1['x'], p1['y']),
            end=(p2['x'], p2['y']),
            stroke=color,
            stroke_width=stroke_width
        )
        self.layer_objects.add(line)

    def draw_ray_segment(self, segment, color='blue', opacity=1.0, stroke_width=1.5,
                         layer=None, element_id=None):
        """
        Draw one ray segment.

        Segments with NaN or infinite coordinates are skipped.

        Args:
            segment (RaySegment): The segment to draw
            color (str): CSS color string (default: 'blue')
            opacity (float): Opacity 0.0-1.0 (default: 1.0)
            stroke_width (float): Line width in pixels (default: 1.5)
            layer (svgwrite.Group or None): Target group (default: rays layer)
            element_id (str or None): Optional id attribute

        Returns:
            bool: True if the segment was drawn
        """
        p1 = segment.p1
        p2 = segment.p2
        coords = (p1['x'], p1['y'], p2['x'], p2['y'])
        if not all(math.isfinite(value) for value in coords):
            return False

        extra = {'id': element_id} if element_id is not None else {}
        line = self.dwg.line(
            start=(p1['x'], p1['y']),
            end=(p2['x'], p2['y']),
            stroke=color,
            stroke_width=stroke_width,
            stroke_opacity=opacity,
            **extra
        )
        (layer if layer is not None else self.layer_rays).add(line)
        return True

    def draw_path(self, path):
        """
        Draw the live path: the launch segment in red, every reflected
        segment in blue.

        Args:
            path (list): RaySegment objects
        """
        for i, segment in enumerate(path):
            if i == 0:
                self.draw_ray_segment(segment, color='red', stroke_width=2, element_id='ray-0')
            else:
                self.draw_ray_segment(segment, color='blue', stroke_width=1.5,
                                      element_id=f'ray-{i}')

    def draw_trail(self, trail, simulator, now, max_bounces=None):
        """
        Draw the faded paths of a trail history.

        Every entry is traced again through the simulator; opacity grows
        with the age of the entry.

        Args:
            trail (TrailHistory): Recorded angles
            simulator (Simulator): Simulator used to re-derive each path
            now (int): Current frame counter
            max_bounces (int or None): Bounce cap (default: simulator default)
        """
        for entry, path in trail.paths(simulator, max_bounces):
            opacity = trail.opacity(entry, now)
            for segment in path:
                self.draw_ray_segment(
                    segment,
                    color='#969696',
                    opacity=opacity,
                    stroke_width=1,
                    layer=self.layer_trail
                )

    def draw_point(self, point, color='black', radius=3, label=None):
        """
        Draw a point (filled circle), e.g. the launch point.

        Args:
            point (dict): Point with 'x' and 'y' keys
            color (str): Fill color (default: 'black')
            radius (float): Circle radius in pixels (default: 3)
            label (str or None): Optional text label to show near point
        """
        circle = self.dwg.circle(
            center=(point['x'], point['y']),
            r=radius,
            fill=color
        )
        self.layer_labels.add(circle)

        if label:
            text = self.dwg.text(
                label,
                insert=(point['x'] + radius + 2, point['y'] - radius - 2),
                fill=color,
                font_size='12px',
                font_family='sans-serif'
            )
            self.layer_labels.add(text)

    def save(self, filename):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (e.g., 'output.svg')
        """
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
