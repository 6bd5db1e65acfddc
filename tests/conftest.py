"""Pytest configuration and fixtures."""
import pytest

from mirror_optics import SceneLayout, Simulator


@pytest.fixture
def layout():
    """Default enclosure: 600x600 canvas, 3x3 mirror grid without the center cell."""
    return SceneLayout()


@pytest.fixture
def scene(layout):
    return layout.build_scene()


@pytest.fixture
def simulator(scene):
    return Simulator(scene)
