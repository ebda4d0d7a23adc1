"""Tests for the keyboard handling of the interactive renderer."""

import pytest

from dalton.rendering.interactive import _KEY_COMMANDS, _apply_key_action
from dalton.viewer import Command


@pytest.fixture
def loaded(viewer, co_path):
    viewer.load(co_path)
    return viewer


@pytest.fixture
def state():
    return {"help_visible": False}


class TestApplyKeyAction:
    @pytest.mark.parametrize("key, angles", [
        ("1", (0.0, 0.0)),
        ("2", (-180.0, 0.0)),
        ("3", (-90.0, 0.0)),
        ("4", (90.0, 0.0)),
        ("5", (0.0, -90.0)),
        ("6", (0.0, 90.0)),
    ])
    def test_viewpoint_keys(self, loaded, state, key, angles):
        assert _apply_key_action(key, loaded, state) == "view"
        view = loaded.view
        assert (view.horizontal_angle, view.vertical_angle) == angles

    def test_arrow_keys_pan_and_tilt(self, loaded, state):
        _apply_key_action("right", loaded, state)
        _apply_key_action("right", loaded, state)
        _apply_key_action("left", loaded, state)
        _apply_key_action("up", loaded, state)
        assert loaded.view.horizontal_angle == 5.0
        assert loaded.view.vertical_angle == 5.0

    def test_back_key_reorders(self, loaded, state):
        _apply_key_action("2", loaded, state)
        assert [p.element for p in loaded.ordered_points()] == ["Oxygen", "Carbon"]

    def test_zoom_keys(self, loaded, state):
        before = loaded.points.radii.copy()
        _apply_key_action("+", loaded, state)
        _apply_key_action("=", loaded, state)
        _apply_key_action("-", loaded, state)
        assert list(loaded.points.radii) == list(before + 15.0)

    def test_help_toggle(self, loaded, state):
        assert _apply_key_action("h", loaded, state) == "help"
        assert state["help_visible"] is True
        _apply_key_action("h", loaded, state)
        assert state["help_visible"] is False

    def test_unknown_key(self, loaded, state):
        order = loaded.order.copy()
        assert _apply_key_action("q", loaded, state) == "none"
        assert list(loaded.order) == list(order)

    def test_every_command_but_load_has_a_key(self):
        bound = set(_KEY_COMMANDS.values())
        assert bound == set(Command) - {Command.LOAD}
