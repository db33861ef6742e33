"""Logical and physical button editors."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from joyconf.debuglog import DebugLog
from joyconf.model import (
    LOGIC_FUNCTIONS,
    MAX_BUTTONS_NUM,
    SHIFTS,
    TIMERS,
    ButtonType,
    DeviceConfig,
)

Color = tuple[int, int, int]

PRESSED_COLOR: Color = (0, 128, 0)
LIGHT_OFF_COLOR: Color = (170, 60, 60)
DARK_OFF_COLOR: Color = (90, 90, 90)

_RENDER_HOLD_MS = 30
_DARK_THRESHOLD = 100


@dataclass
class _SharedFocus:
    """Focus state shared by all logical buttons of one editor."""

    current: int = -1
    auto_phys_enabled: bool = False


def _expired(clock: Callable[[], float], started: float | None, timeout_ms: int) -> bool:
    return started is None or (clock() - started) * 1000.0 > timeout_ms


FunctionTypeListener = Callable[[int, int, int], None]


class LogicalButton:
    """Editor for one logical button: its physical source, function, shift and timers."""

    def __init__(
        self,
        button_index: int,
        focus: _SharedFocus | None = None,
        debug_log: DebugLog | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.button_index = button_index
        self.focus = focus if focus is not None else _SharedFocus()
        self.debug_log = debug_log
        self.function_type_listeners: list[FunctionTypeListener] = []
        self.current_state = False
        self.highlighted = False
        self.spin_highlighted = False
        self.spin_enabled = True
        self.editing_enabled = False
        self.is_disabled = False
        self.is_inverted = False
        self.shift_index = 0
        self.delay_timer_index = 0
        self.press_timer_index = 0
        self.max_phys_buttons = MAX_BUTTONS_NUM
        self._physical_number = 0
        self._function_index = 0
        self._function_prev_type: int = ButtonType.BUTTON_NORMAL
        self._debug_state = False
        self._last_act: float | None = None
        self._clock = clock
        self._enum_index = [int(t) for t, _ in LOGIC_FUNCTIONS]
        self._item_enabled = [True] * len(self._enum_index)

    @property
    def number(self) -> int:
        """One-based number shown for this button."""
        return self.button_index + 1

    @property
    def function_names(self) -> tuple[str, ...]:
        return tuple(name for _, name in LOGIC_FUNCTIONS)

    @property
    def function_index(self) -> int:
        return self._function_index

    @function_index.setter
    def function_index(self, index: int) -> None:
        if not 0 <= index < len(self._enum_index):
            raise IndexError(f"function index {index} out of range")
        if index != self._function_index:
            self._function_index = index
            self.function_index_changed(index)

    @property
    def physical_number(self) -> int:
        """One-based physical button number; 0 means none."""
        return self._physical_number

    @physical_number.setter
    def physical_number(self, value: int) -> None:
        value = max(0, min(value, self.max_phys_buttons))
        if value != self._physical_number:
            self._physical_number = value
            self.editing_on_off(value)

    @property
    def current_focus(self) -> int:
        return self.focus.current

    @property
    def auto_phys_enabled(self) -> bool:
        return self.focus.auto_phys_enabled

    @auto_phys_enabled.setter
    def auto_phys_enabled(self, enabled: bool) -> None:
        self.focus.auto_phys_enabled = enabled

    def is_function_enabled(self, index: int) -> bool:
        return self._item_enabled[index]

    def set_max_phys_buttons(self, max_phys_buttons: int) -> None:
        self.max_phys_buttons = max_phys_buttons
        self.physical_number = self._physical_number

    def set_spin_box_on_off(self, max_phys_buttons: int) -> None:
        self.spin_enabled = max_phys_buttons > 0

    def function_index_changed(self, index: int) -> None:
        button_type = self._enum_index[index]
        for listener in self.function_type_listeners:
            listener(button_type, self._function_prev_type, self.button_index)
        self._function_prev_type = button_type

    def editing_on_off(self, value: int) -> None:
        self.editing_enabled = value > 0 and self.spin_enabled

    def set_button_state(self, state: bool) -> None:
        """Show the live state; releases are held briefly so short presses stay visible."""
        if state != self.current_state:
            if state:
                self.highlighted = True
                self._last_act = self._clock()
                self.current_state = True
            elif _expired(self._clock, self._last_act, _RENDER_HOLD_MS):
                self.highlighted = False
                self.current_state = False
        if state != self._debug_state:
            if self.debug_log is not None:
                self.debug_log.logical_button_state(self.number, state)
            self._debug_state = state

    def set_physic_button(self, button_index: int) -> None:
        self.physical_number = button_index + 1

    def _type_to_index(self, button_type: int) -> int:
        try:
            return self._enum_index.index(int(button_type))
        except ValueError:
            raise ValueError(f"unknown button type {button_type}") from None

    def disable_button_type(self, button_type: int, disable: bool) -> None:
        self._item_enabled[self._type_to_index(button_type)] = not disable

    def current_button_type(self) -> int:
        return self._enum_index[self._function_index]

    def focus_in(self) -> None:
        if self.focus.auto_phys_enabled:
            self.spin_highlighted = True
            self.focus.current = self.button_index

    def focus_out(self) -> None:
        if self.focus.auto_phys_enabled:
            self.spin_highlighted = False
            self.focus.current = -1

    def read_from_config(self, config: DeviceConfig) -> None:
        button = config.buttons[self.button_index]
        self.physical_number = button.physical_num + 1
        self.is_disabled = bool(button.is_disabled)
        self.is_inverted = bool(button.is_inverted)
        self.function_index = self._type_to_index(button.type)
        self.shift_index = next(
            (i for i, (value, _) in enumerate(SHIFTS) if value == button.shift_modificator),
            self.shift_index,
        )
        self.delay_timer_index = next(
            (i for i, (value, _) in enumerate(TIMERS) if value == button.delay_timer),
            self.delay_timer_index,
        )
        self.press_timer_index = next(
            (i for i, (value, _) in enumerate(TIMERS) if value == button.press_timer),
            self.press_timer_index,
        )

    def write_to_config(self, config: DeviceConfig) -> None:
        button = config.buttons[self.button_index]
        button.physical_num = self.physical_number - 1
        button.is_disabled = self.is_disabled
        button.is_inverted = self.is_inverted
        button.type = self.current_button_type()
        button.shift_modificator = SHIFTS[self.shift_index][0]
        button.delay_timer = TIMERS[self.delay_timer_index][0]
        button.press_timer = TIMERS[self.press_timer_index][0]


class PhysicalButton:
    """Indicator for one physical button input."""

    def __init__(
        self,
        button_index: int,
        background_value: int = 255,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.button_index = button_index
        self.current_state = False
        self.pressed_listeners: list[Callable[[int], None]] = []
        self.color: Color = LIGHT_OFF_COLOR
        self._background_value = background_value
        self._last_act: float | None = None
        self._clock = clock
        self.update_style(background_value)

    @property
    def number(self) -> int:
        return self.button_index + 1

    def set_button_state(self, state: bool) -> None:
        if state == self.current_state:
            return
        if state:
            self.color = PRESSED_COLOR
            for listener in self.pressed_listeners:
                listener(self.button_index)
            self._last_act = self._clock()
            self.current_state = True
        elif _expired(self._clock, self._last_act, _RENDER_HOLD_MS):
            self.update_style(self._background_value)
            self.current_state = False

    def update_style(self, background_value: int) -> None:
        """Pick the released colour for a light or dark background."""
        self._background_value = background_value
        self.color = DARK_OFF_COLOR if background_value < _DARK_THRESHOLD else LIGHT_OFF_COLOR