"""
Pytest configuration and fixtures for the bouncing ball tests.

This module provides:
- A 200x200 container and a radius-10 ball matching the worked examples
- A seeded World for tests that need the full shared state

Only the Qt-free model and loop are exercised here.
"""

import logging

import pytest

from bouncingball.model.ball import Ball
from bouncingball.model.container import Container
from bouncingball.model.state import World


@pytest.fixture
def box():
    """Container spanning (0, 0) to (200, 200)."""
    return Container(0.0, 0.0, 200.0, 200.0)


@pytest.fixture
def ball():
    """Radius-10 ball at the center of the 200x200 box, moving (3, 4)."""
    return Ball(x=100.0, y=100.0, radius=10.0, speed_x=3.0, speed_y=4.0)


@pytest.fixture
def world(box, ball):
    return World(ball=ball, box=box)


@pytest.fixture
def caplog_debug(caplog):
    """caplog capturing everything below the bouncingball logger."""
    caplog.set_level(logging.DEBUG, logger="bouncingball")
    return caplog
