"""Tests for SVG output and the command line entry point."""

import json
import math

import pytest

from mirror_optics import RaySegment, TrailHistory
from mirror_optics.__main__ import main
from mirror_optics.svg_renderer import SVGRenderer


@pytest.fixture
def renderer(scene):
    return SVGRenderer.for_scene(scene)


class TestSVGRenderer:

    def test_scene_is_drawn(self, renderer, scene):
        renderer.draw_scene(scene)
        svg = renderer.to_string()
        assert svg.count('<circle') == 8
        assert svg.count('<line') == 4
        assert 'id="objects"' in svg

    def test_live_path_colors(self, renderer, simulator):
        renderer.draw_path(simulator.trace(0, 3))
        svg = renderer.to_string()
        assert 'id="ray-0"' in svg
        assert 'id="ray-2"' in svg
        assert 'stroke="red"' in svg
        assert 'stroke="blue"' in svg

    def test_trail_is_drawn_in_its_own_layer(self, renderer, simulator):
        trail = TrailHistory()
        trail.record(10.0, 0)
        trail.record(20.0, 1)
        renderer.draw_trail(trail, simulator, now=2, max_bounces=2)
        assert len(renderer.layer_trail.elements) == 4
        assert 'stroke="#969696"' in renderer.to_string()

    def test_non_finite_segment_is_skipped(self, renderer):
        segment = RaySegment({'x': 0, 'y': 0}, {'x': math.nan, 'y': 1})
        assert renderer.draw_ray_segment(segment) is False
        assert len(renderer.layer_rays.elements) == 0

    def test_save(self, renderer, scene, tmp_path):
        renderer.draw_scene(scene)
        renderer.draw_point(scene.center, color='red', label='start')
        out = tmp_path / 'scene.svg'
        renderer.save(str(out))
        content = out.read_text(encoding='utf-8')
        assert '<svg' in content
        assert 'start' in content


class TestCommandLine:

    def test_prints_segments(self, capsys):
        assert main(['--angle', '0', '--bounces', '2']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].split('\t') == [
            '0', '300.000000', '300.000000', '400.000000', '300.000000'
        ]
        assert lines[1].split('\t')[3] == '200.000000'

    def test_writes_svg(self, tmp_path):
        out = tmp_path / 'path.svg'
        assert main(['--angle', '12.5', '--output', str(out),
                     '--trail-step', '1', '--trail-count', '3']) == 0
        content = out.read_text(encoding='utf-8')
        assert 'id="ray-0"' in content
        assert '#969696' in content

    def test_layout_file(self, tmp_path, capsys):
        layout_file = tmp_path / 'layout.json'
        layout_file.write_text(json.dumps({'max_bounces': 3}), encoding='utf-8')
        assert main(['--angle', '5', '--layout', str(layout_file)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 3

    def test_invalid_layout_exits_with_error(self, tmp_path):
        layout_file = tmp_path / 'layout.json'
        layout_file.write_text(json.dumps({'mirror_radius': 100}), encoding='utf-8')
        with pytest.raises(SystemExit) as excinfo:
            main(['--layout', str(layout_file)])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("content", [
        {'mirror_radius': 'big'},
        {'canvas_size': '600'},
        [1, 2],
    ])
    def test_badly_typed_layout_exits_with_error(self, tmp_path, content):
        layout_file = tmp_path / 'layout.json'
        layout_file.write_text(json.dumps(content), encoding='utf-8')
        with pytest.raises(SystemExit) as excinfo:
            main(['--layout', str(layout_file)])
        assert excinfo.value.code == 2
