"""Tests for the Container box: extents, resize and bounds queries."""

import pytest

from bouncingball.model.container import Container


class TestResize:
    """resize() overwrites the extents in place."""

    def test_resize_overwrites_all_extents(self, box):
        original_id = id(box)

        box.resize(10, 20, 300, 400)

        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (10.0, 20.0, 300.0, 400.0)
        assert id(box) == original_id

    def test_resize_stores_floats(self, box):
        box.resize(0, 0, 640, 480)
        assert all(isinstance(v, float) for v in (box.min_x, box.min_y, box.max_x, box.max_y))

    def test_width_and_height_follow_resize(self, box):
        box.resize(50, 25, 150, 100)
        assert box.width == 100.0
        assert box.height == 75.0


class TestFromSize:

    def test_from_size_starts_at_origin(self):
        box = Container.from_size(640, 480)
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0.0, 0.0, 640.0, 480.0)

    def test_default_colors(self):
        box = Container.from_size(640, 480)
        assert box.fill_color == "black"
        assert box.border_color == "white"


class TestBoundsQueries:

    @pytest.mark.parametrize("x, y, expected", [
        (100, 100, True),
        (10, 10, True),     # touching two walls still counts as inside
        (190, 190, True),
        (9.5, 100, False),  # pokes through the left wall
        (100, 190.5, False),
    ])
    def test_contains(self, box, x, y, expected):
        assert box.contains(x, y, 10) is expected

    def test_fits_up_to_half_of_smaller_side(self):
        box = Container(0, 0, 300, 200)
        assert box.fits(100)
        assert not box.fits(100.5)
