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

"""Command line entry point: trace one launch angle and print or render it."""

import argparse
import json
import logging
import sys

from .layout import SceneLayout
from .svg_renderer import SVGRenderer
from .trail import TrailHistory, step_angle

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mirror-optics',
        description="Trace a light ray bouncing between circular mirrors in a walled enclosure."
    )
    parser.add_argument("--angle", type=float, default=0.0, help="Launch angle in degrees.")
    parser.add_argument("--bounces", type=int, default=None,
                        help="Maximum number of segments (default: from the layout).")
    parser.add_argument("--layout", type=str, default=None,
                        help="JSON file with layout properties overriding the defaults.")
    parser.add_argument("--output", type=str, default=None,
                        help="Write an SVG rendering to this file instead of printing segments.")
    parser.add_argument("--trail-step", type=float, default=0.0,
                        help="Angle increment between trail entries, in degrees.")
    parser.add_argument("--trail-count", type=int, default=0,
                        help="Number of earlier angles to draw as a fading trail.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def load_layout(path):
    if path is None:
        return SceneLayout()
    with open(path, 'r', encoding='utf-8') as f:
        return SceneLayout(json.load(f))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        layout = load_layout(args.layout)
        simulator = layout.build_simulator()
        path = simulator.trace(args.angle, args.bounces)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if args.output is None:
        for segment in path:
            print(f"{segment.bounce}\t{segment.p1['x']:.6f}\t{segment.p1['y']:.6f}"
                  f"\t{segment.p2['x']:.6f}\t{segment.p2['y']:.6f}")
        return 0

    renderer = SVGRenderer.for_scene(simulator.scene)
    renderer.draw_scene(simulator.scene)

    if args.trail_count > 0:
        trail = TrailHistory(max_entries=args.trail_count)
        for frame in range(args.trail_count):
            offset = (args.trail_count - frame) * args.trail_step
            trail.record(step_angle(args.angle, -offset), frame)
        renderer.draw_trail(trail, simulator, now=args.trail_count, max_bounces=args.bounces)

    renderer.draw_path(path)
    renderer.draw_point(simulator.scene.center, color='red')
    renderer.save(args.output)
    logger.info("Wrote %d segments to %s", len(path), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
