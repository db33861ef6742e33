"""Running totals of the resources used by the current pin assignment."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from joyconf.model import MAX_BUTTONS_NUM, MAX_LEDS_NUM


class SourceKind(IntEnum):
    """Kind of resource a pin function contributes to."""

    AXIS_SOURCE = 0
    BUTTON_FROM_AXES = 1
    SINGLE_BUTTON = 2
    ROW_OF_BUTTONS = 3
    COLUMN_OF_BUTTONS = 4
    SINGLE_LED = 5
    ROW_OF_LED = 6
    COLUMN_OF_LED = 7


_BUTTON_COUNTERS = {
    SourceKind.SINGLE_BUTTON: "single_buttons",
    SourceKind.ROW_OF_BUTTONS: "rows_of_buttons",
    SourceKind.COLUMN_OF_BUTTONS: "columns_of_buttons",
}

_LED_COUNTERS = {
    SourceKind.SINGLE_LED: "single_leds",
    SourceKind.ROW_OF_LED: "rows_of_leds",
    SourceKind.COLUMN_OF_LED: "columns_of_leds",
}


class CurrentConfig:
    """Counts axes, buttons and LEDs and reports when a device limit is exceeded."""

    def __init__(self) -> None:
        self.axis_sources = 0
        self.buttons_from_axes = 0
        self.buttons_from_shift_regs = 0
        self.single_buttons = 0
        self.rows_of_buttons = 0
        self.columns_of_buttons = 0
        self.single_leds = 0
        self.rows_of_leds = 0
        self.columns_of_leds = 0
        self.buttons_warning = False
        self.leds_warning = False
        self._limit = False
        self.total_buttons_listeners: list[Callable[[int], None]] = []
        self.total_leds_listeners: list[Callable[[int], None]] = []
        self.limit_listeners: list[Callable[[bool], None]] = []

    @property
    def buttons_from_matrix(self) -> int:
        return self.rows_of_buttons * self.columns_of_buttons

    @property
    def total_buttons(self) -> int:
        return (
            self.buttons_from_shift_regs
            + self.buttons_from_axes
            + self.single_buttons
            + self.buttons_from_matrix
        )

    @property
    def total_leds(self) -> int:
        return self.single_leds + self.rows_of_leds * self.columns_of_leds

    def set_config(self, kind: int, delta: int) -> None:
        """Add ``delta`` to the counter of ``kind`` and recompute the totals."""
        kind = SourceKind(kind)
        if kind == SourceKind.AXIS_SOURCE:
            self.axis_sources += delta
        elif kind in _BUTTON_COUNTERS:
            name = _BUTTON_COUNTERS[kind]
            setattr(self, name, getattr(self, name) + delta)
            self.total_buttons_changed(self.total_buttons)
        elif kind in _LED_COUNTERS:
            name = _LED_COUNTERS[kind]
            setattr(self, name, getattr(self, name) + delta)
            self.total_leds_changed(self.total_leds)

    def a2b_count_changed(self, count: int) -> None:
        """Set the number of buttons generated from axes."""
        self.buttons_from_axes = count
        self.total_buttons_changed(self.total_buttons)

    def shift_reg_buttons_count_changed(self, count: int) -> None:
        """Set the number of buttons read through shift registers."""
        self.buttons_from_shift_regs = count
        self.total_buttons_changed(self.total_buttons)

    def _set_limit(self, reached: bool) -> None:
        if self._limit != reached:
            self._limit = reached
            for listener in self.limit_listeners:
                listener(reached)

    def total_buttons_changed(self, count: int) -> None:
        if count > MAX_BUTTONS_NUM:
            self.buttons_warning = True
            self._set_limit(True)
        elif self.buttons_warning:
            self.buttons_warning = False
            self._set_limit(False)
        for listener in self.total_buttons_listeners:
            listener(count)

    def total_leds_changed(self, count: int) -> None:
        if count > MAX_LEDS_NUM:
            self.leds_warning = True
            self._set_limit(True)
        else:
            self.leds_warning = False
            self._set_limit(False)
        for listener in self.total_leds_listeners:
            listener(count)

    def limit_is_reached(self) -> bool:
        return self._limit