"""Button page: logical and physical buttons, shift modifiers and button timers."""

from __future__ import annotations

import time
from collections.abc import Callable

from joyconf.buttons import LogicalButton, PhysicalButton, _SharedFocus
from joyconf.debuglog import DebugLog
from joyconf.model import (
    MAX_BUTTONS_NUM,
    SHIFT_CONFIG_COUNT,
    SHIFT_COUNT,
    ButtonType,
    DeviceConfig,
    ParamsReport,
)

PHYS_BUTTON_COLUMNS = 8

BUTTON_TYPE_LIMITS: tuple[tuple[ButtonType, int], ...] = (
    (ButtonType.ENCODER_INPUT_A, 15),
    (ButtonType.ENCODER_INPUT_B, 15),
)

EncoderInputListener = Callable[[int, int], None]


class ButtonConfig:
    """Editor for all logical buttons plus the live physical button indicators."""

    def __init__(
        self,
        auto_phys_button: bool = True,
        debug_log: DebugLog | None = None,
        background_value: int = 255,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._background_value = background_value
        self.encoder_input_listeners: list[EncoderInputListener] = []
        self._focus = _SharedFocus()
        self.logical_buttons: list[LogicalButton] = []
        for i in range(MAX_BUTTONS_NUM):
            button = LogicalButton(i, self._focus, debug_log, clock)
            button.function_type_listeners.append(self.function_type_changed)
            self.logical_buttons.append(button)
        self.physical_buttons: list[PhysicalButton] = []
        self.shift_enabled = True
        self.shift_buttons = [0] * SHIFT_CONFIG_COUNT
        self.shift_highlighted = [False] * SHIFT_CONFIG_COUNT
        self._shifts_active = False
        self.button_timer1_ms = 0
        self.button_timer2_ms = 0
        self.button_timer3_ms = 0
        self.button_debounce_ms = 0
        self.a2b_debounce_ms = 0
        self.encoder_press_time_ms = 0
        self._limit_counts = [0] * len(BUTTON_TYPE_LIMITS)
        self._limit_enabled = [False] * len(BUTTON_TYPE_LIMITS)
        self.auto_phys_enabled = auto_phys_button
        self.set_auto_phys_button(auto_phys_button)

    def physical_button_position(self, index: int) -> tuple[int, int]:
        """Grid (row, column) of a physical button indicator."""
        if not 0 <= index < len(self.physical_buttons):
            raise IndexError(f"physical button {index} out of range")
        return divmod(index, PHYS_BUTTON_COLUMNS)

    def set_ui_on_off(self, value: int) -> None:
        """Adapt the page to ``value`` physical buttons being available."""
        self.shift_enabled = value > 0
        for button in self.logical_buttons:
            button.set_spin_box_on_off(value)
            button.set_max_phys_buttons(value)

        self.physical_buttons = []
        for i in range(value):
            phys = PhysicalButton(i, self._background_value, self._clock)
            phys.pressed_listeners.append(self.set_physic_button)
            self.physical_buttons.append(phys)

    def _emit_encoder(self, input_a: int, input_b: int) -> None:
        for listener in self.encoder_input_listeners:
            listener(input_a, input_b)

    def function_type_changed(self, current: int, previous: int, button_index: int) -> None:
        """Report encoder input changes (negative numbers remove) and apply type limits."""
        number = button_index + 1
        if current == ButtonType.ENCODER_INPUT_A:
            self._emit_encoder(number, 0)
        elif current == ButtonType.ENCODER_INPUT_B:
            self._emit_encoder(0, number)

        if previous == ButtonType.ENCODER_INPUT_A:
            self._emit_encoder(-number, 0)
        elif previous == ButtonType.ENCODER_INPUT_B:
            self._emit_encoder(0, -number)
        self.type_limit(current, previous)

    def type_limit(self, current: int, previous: int) -> None:
        """Disable a button function everywhere else once its limit is reached."""
        for i, (limited, max_count) in enumerate(BUTTON_TYPE_LIMITS):
            if current == limited:
                self._limit_counts[i] += 1
            if previous == limited:
                self._limit_counts[i] -= 1

            if self._limit_counts[i] >= max_count and not self._limit_enabled[i]:
                self._limit_enabled[i] = True
                for button in self.logical_buttons:
                    if button.current_button_type() != current:
                        button.disable_button_type(current, True)

            if self._limit_enabled[i] and self._limit_counts[i] < max_count:
                self._limit_enabled[i] = False
                for button in self.logical_buttons:
                    button.disable_button_type(previous, False)

    def set_physic_button(self, button_index: int) -> None:
        """Assign a pressed physical button to the focused logical button."""
        if not self.auto_phys_enabled:
            return
        focused = self.logical_buttons[0].current_focus
        if focused >= 0:
            self.logical_buttons[focused].set_physic_button(button_index)

    def set_auto_phys_button(self, checked: bool) -> None:
        self.auto_phys_enabled = checked
        self.logical_buttons[0].auto_phys_enabled = checked

    def button_state_changed(self, report: ParamsReport) -> None:
        """Show the live button and shift states carried by ``report``."""
        for i, button in enumerate(self.logical_buttons):
            button.set_button_state(report.logical_button(i))
        for i, phys in enumerate(self.physical_buttons):
            phys.set_button_state(report.physical_button(i))

        for i in range(SHIFT_COUNT):
            if report.shift_active(i):
                self._shifts_active = True
                if i < SHIFT_CONFIG_COUNT and not self.shift_highlighted[i]:
                    self.shift_highlighted[i] = True
            elif self._shifts_active:
                # Only the pass for the first shift releases a highlight, one per report.
                if i == 0:
                    for k, active in enumerate(self.shift_highlighted):
                        if active:
                            self.shift_highlighted[k] = False
                            break
                if not any(self.shift_highlighted):
                    self._shifts_active = False

    def read_from_config(self, config: DeviceConfig) -> None:
        for button in self.logical_buttons:
            button.read_from_config(config)
        self.shift_buttons = [shift.button + 1 for shift in config.shift_config]
        self.button_timer1_ms = config.button_timer1_ms
        self.button_timer2_ms = config.button_timer2_ms
        self.button_timer3_ms = config.button_timer3_ms
        self.button_debounce_ms = config.button_debounce_ms
        self.a2b_debounce_ms = config.a2b_debounce_ms
        self.encoder_press_time_ms = config.encoder_press_time_ms

    def write_to_config(self, config: DeviceConfig) -> None:
        for shift, value in zip(config.shift_config, self.shift_buttons):
            shift.button = value - 1
        config.button_timer1_ms = self.button_timer1_ms
        config.button_timer2_ms = self.button_timer2_ms
        config.button_timer3_ms = self.button_timer3_ms
        config.button_debounce_ms = self.button_debounce_ms
        config.a2b_debounce_ms = self.a2b_debounce_ms
        config.encoder_press_time_ms = self.encoder_press_time_ms
        for button in self.logical_buttons:
            button.write_to_config(config)