"""Two-state light/dark switch."""

from __future__ import annotations

from collections.abc import Callable

Color = tuple[int, int, int]

SUN_LIGHT_MODE: Color = (248, 227, 161)
SUN_DARK_MODE: Color = (124, 113, 60)
SUN_BACKGROUND: Color = (100, 123, 210)
MOON_LIGHT_MODE: Color = (74, 79, 89)
MOON_DARK_MODE: Color = (248, 227, 161)
MOON_BACKGROUND: Color = (39, 51, 69)


class SwitchButton:
    """A toggle that flips on a completed left click and reports state changes."""

    def __init__(self) -> None:
        self.checked = False
        self.mouse_pressed = False
        self.width = 0
        self.height = 0
        self.half_width = 0.0
        self.half_height = 0.0
        self.state_listeners: list[Callable[[bool], None]] = []
        self.sun_color: Color = SUN_LIGHT_MODE
        self.moon_color: Color = MOON_LIGHT_MODE
        self._change_color(self.checked)

    @property
    def background(self) -> Color:
        return MOON_BACKGROUND if self.checked else SUN_BACKGROUND

    @property
    def knob_center(self) -> tuple[float, float]:
        """Centre of the knob: left end when off, right end when on."""
        x = self.width - self.half_height if self.checked else self.half_height
        return (x, self.half_height)

    def _change_color(self, checked: bool) -> None:
        if checked:
            self.sun_color, self.moon_color = SUN_DARK_MODE, MOON_DARK_MODE
        else:
            self.sun_color, self.moon_color = SUN_LIGHT_MODE, MOON_LIGHT_MODE

    def set_checked(self, checked: bool) -> None:
        if checked == self.checked:
            return
        self.checked = checked
        self._change_color(checked)
        for listener in self.state_listeners:
            listener(checked)

    def mouse_press(self, left_button: bool) -> None:
        if left_button:
            self.mouse_pressed = True

    def mouse_release(self, left_button: bool) -> None:
        if left_button and self.mouse_pressed:
            self.set_checked(not self.checked)
            self.mouse_pressed = False

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.half_width = width / 2.0
        self.half_height = height / 2.0