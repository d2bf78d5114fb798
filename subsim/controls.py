"""Keyboard and mouse handling that drives the submarine, camera and view toggles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from subsim.camera import Camera
from subsim.geometry import PI, is_zero
from subsim.scene_object import SceneObject
from subsim.submarine import SUBMARINE_SPEED

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_WINDOW_MOUSE_SENSITIVITY = 0.005

PHI_LIMIT = PI / 2 - 0.01


class SpecialKey(IntEnum):
    """Codes of the non-character keys the controls react to."""

    UP = 0x0065
    DOWN = 0x0067


# key -> (axis, value set on press)
_MOVE_KEYS = {
    "w": (2, 1.0),
    "s": (2, -1.0),
    "a": (0, 1.0),
    "d": (0, -1.0),
}
_SPECIAL_MOVES = {
    SpecialKey.UP: (1, 1.0),
    SpecialKey.DOWN: (1, -1.0),
}


@dataclass
class Controls:
    """Input state: moves the submarine, orbits the camera and flips view options."""

    submarine: SceneObject
    camera: Camera = field(default_factory=Camera)
    mouse_sensitivity: float = DEFAULT_WINDOW_MOUSE_SENSITIVITY
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    fog_on: bool = True
    wire_frame_on: bool = False
    full_screen_on: bool = False
    quit_requested: bool = False
    last_mouse: tuple[int, int] | None = None

    def _set_axis(self, axis: int, value: float) -> None:
        direction = list(self.submarine.direction)
        direction[axis] = value
        self.submarine.direction = tuple(direction)

    def _release_axis(self, axis: int, pressed_value: float) -> None:
        current = self.submarine.direction[axis]
        if current * pressed_value > 0.0:
            self._set_axis(axis, 0.0)
        if is_zero(self.submarine.direction):
            self.submarine.speed = 0.0

    def _start_if_moving(self) -> None:
        if not is_zero(self.submarine.direction):
            self.submarine.speed = SUBMARINE_SPEED

    def key_down(self, key: str) -> None:
        """Handle a character key press."""
        if key in _MOVE_KEYS:
            self._set_axis(*_MOVE_KEYS[key])
        elif key == "u":
            self.wire_frame_on = not self.wire_frame_on
        elif key == "f":
            if self.full_screen_on:
                self.width, self.height = DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
            self.full_screen_on = not self.full_screen_on
        elif key == "b":
            self.fog_on = not self.fog_on
        elif key == "q":
            self.quit_requested = True
        self._start_if_moving()

    def key_up(self, key: str) -> None:
        """Handle a character key release, stopping motion along that key's axis."""
        if key in _MOVE_KEYS:
            self._release_axis(*_MOVE_KEYS[key])
        elif is_zero(self.submarine.direction):
            self.submarine.speed = 0.0

    def special_down(self, key: int) -> None:
        """Handle a special key press: up and down arrows move vertically."""
        move = _SPECIAL_MOVES.get(key)
        if move is not None:
            self._set_axis(*move)
        self._start_if_moving()

    def special_up(self, key: int) -> None:
        """Handle a special key release."""
        move = _SPECIAL_MOVES.get(key)
        if move is not None:
            self._release_axis(*move)
        elif is_zero(self.submarine.direction):
            self.submarine.speed = 0.0

    def mouse_move(self, x: int, y: int) -> None:
        """Orbit the camera by the mouse movement since the last call."""
        if self.last_mouse is None:
            self.last_mouse = (x, y)
            return
        last_x, last_y = self.last_mouse
        self.camera.theta += (x - last_x) * self.mouse_sensitivity
        phi = self.camera.phi - (y - last_y) * self.mouse_sensitivity
        self.camera.phi = max(-PHI_LIMIT, min(PHI_LIMIT, phi))
        self.last_mouse = (x, y)