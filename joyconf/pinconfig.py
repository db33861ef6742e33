"""Pin assignment for the whole board, with the rules that tie pins together."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from joyconf.currentconfig import CurrentConfig, SourceKind
from joyconf.model import PINS_COUNT, DeviceConfig, PinType
from joyconf.pins import PinComboBox, pin_list

_BUTTONS_FROM_AXES_MARKER = 678
_I2C_AXIS_SOURCE = -2
_PA8_INDEX = 8

_SOURCES: tuple[tuple[SourceKind, tuple[int, ...]], ...] = (
    (
        SourceKind.AXIS_SOURCE,
        (
            PinType.AXIS_ANALOG, PinType.TLE5011_CS, PinType.MCP3201_CS,
            PinType.MCP3202_CS, PinType.MCP3204_CS, PinType.MCP3208_CS,
            PinType.MLX90393_CS, PinType.MLX90363_CS, PinType.AS5048A_CS,
            PinType.TLE5012_CS,
        ),
    ),
    (SourceKind.BUTTON_FROM_AXES, (_BUTTONS_FROM_AXES_MARKER,)),
    (SourceKind.SINGLE_BUTTON, (PinType.BUTTON_VCC, PinType.BUTTON_GND)),
    (SourceKind.ROW_OF_BUTTONS, (PinType.BUTTON_ROW,)),
    (SourceKind.COLUMN_OF_BUTTONS, (PinType.BUTTON_COLUMN,)),
    (SourceKind.SINGLE_LED, (PinType.LED_SINGLE,)),
    (SourceKind.ROW_OF_LED, (PinType.LED_ROW,)),
    (SourceKind.COLUMN_OF_LED, (PinType.LED_COLUMN,)),
)

PIN_TYPE_LIMITS: tuple[tuple[PinType, int], ...] = (
    (PinType.SHIFT_REG_LATCH, 4),
    (PinType.SHIFT_REG_DATA, 4),
    (PinType.SHIFT_REG_CLK, 4),
)

_SPI_TYPES = (PinType.SPI_SCK, PinType.SPI_MOSI, PinType.SPI_MISO)


class Board(IntEnum):
    """Supported controller boards."""

    BLUE_PILL = 0
    CONTROLLER_LITE = 1


class PinConfig:
    """Holds one selector per pin and keeps dependent pins and totals consistent."""

    def __init__(self, board: int = Board.BLUE_PILL) -> None:
        try:
            self.board = Board(board)
        except ValueError:
            self.board = Board.BLUE_PILL
        self.current_config = CurrentConfig()
        self.fast_encoder_listeners: list[Callable[[str, bool], None]] = []
        self.shift_reg_listeners: list[Callable[[int, int, int, str], None]] = []
        self.axes_source_listeners: list[Callable[[int, str, bool], None]] = []
        self.shift_latch_count = 0
        self.shift_data_count = 0
        self.shift_clk_count = 0
        self._limit_counts = [0] * len(PIN_TYPE_LIMITS)
        self._limit_enabled = [False] * len(PIN_TYPE_LIMITS)
        self._spi_count = 0
        self.pin_boxes: list[PinComboBox] = [PinComboBox(n) for n in range(1, PINS_COUNT + 1)]
        for box in self.pin_boxes:
            box.interaction_listeners.append(self.pin_interaction)
            box.index_listeners.append(self.pin_index_changed)

    @property
    def total_buttons_listeners(self) -> list[Callable[[int], None]]:
        return self.current_config.total_buttons_listeners

    @property
    def total_leds_listeners(self) -> list[Callable[[int], None]]:
        return self.current_config.total_leds_listeners

    @property
    def limit_listeners(self) -> list[Callable[[bool], None]]:
        return self.current_config.limit_listeners

    def board_changed(self, index: int) -> None:
        """Switch to the board at ``index``; other values are ignored."""
        if index in (Board.BLUE_PILL, Board.CONTROLLER_LITE) and index != self.board:
            self.board = Board(index)

    def pin_interaction(self, index: int, sender_index: int, pin: int) -> None:
        """Apply (or release) a selection that one pin requests on the others."""
        if index != PinType.NOT_USED:
            for box in self.pin_boxes:
                for j, type_index in enumerate(box.type_indices):
                    if type_index != index:
                        continue
                    if box.interact_count == 0:
                        box.interact_count += pin
                        box.set_index_interaction(j, sender_index)
                    elif box.is_interacts:
                        box.interact_count += pin
        else:
            for box in self.pin_boxes:
                if not box.is_interacts:
                    continue
                for type_index in box.type_indices:
                    if type_index != sender_index:
                        continue
                    if box.interact_count > 0:
                        box.interact_count -= pin
                    if box.interact_count <= 0:
                        box.set_index_interaction(0, sender_index)

    def pin_index_changed(
        self, current: int, previous: int, pin_number: int, pin_name: str
    ) -> None:
        """React to a pin's function changing from ``previous`` to ``current``."""
        self._signals_for_widgets(current, previous, pin_number, pin_name)
        self._pin_type_limit(current, previous)
        self._set_current_config(current, previous, pin_number, pin_name)
        self._block_pa8_pwm(current, previous)

    def _emit_axes_source(self, source: int, name: str, is_add: bool) -> None:
        for listener in self.axes_source_listeners:
            listener(source, name, is_add)

    def _emit_shift_reg(self, latch: int, clk: int, data: int, name: str) -> None:
        for listener in self.shift_reg_listeners:
            listener(latch, clk, data, name)

    def _signals_for_widgets(
        self, current: int, previous: int, pin_number: int, pin_name: str
    ) -> None:
        gui_name = pin_list()[pin_number - 1].gui_name

        if current == PinType.FAST_ENCODER or previous == PinType.FAST_ENCODER:
            selected = current == PinType.FAST_ENCODER
            for listener in self.fast_encoder_listeners:
                listener(gui_name, selected)

        if current == PinType.SHIFT_REG_LATCH:
            self.shift_latch_count += 1
            self._emit_shift_reg(pin_number, 0, 0, gui_name)
        elif previous == PinType.SHIFT_REG_LATCH:
            self.shift_latch_count -= 1
            self._emit_shift_reg(-pin_number, 0, 0, gui_name)

        if current == PinType.SHIFT_REG_CLK:
            self.shift_clk_count += 1
            self._emit_shift_reg(0, pin_number, 0, gui_name)
        elif previous == PinType.SHIFT_REG_CLK:
            self.shift_clk_count -= 1
            self._emit_shift_reg(0, -pin_number, 0, gui_name)

        if current == PinType.SHIFT_REG_DATA:
            self.shift_data_count += 1
            self._emit_shift_reg(0, 0, pin_number, gui_name)
        elif previous == PinType.SHIFT_REG_DATA:
            self.shift_data_count -= 1
            self._emit_shift_reg(0, 0, -pin_number, gui_name)

        if current == PinType.I2C_SCL:
            self._emit_axes_source(_I2C_AXIS_SOURCE, pin_name, True)
        elif previous == PinType.I2C_SCL:
            self._emit_axes_source(_I2C_AXIS_SOURCE, pin_name, False)

    def _pin_type_limit(self, current: int, previous: int) -> None:
        for i, (limited, max_count) in enumerate(PIN_TYPE_LIMITS):
            if current == limited:
                self._limit_counts[i] += 1
            if previous == limited:
                self._limit_counts[i] -= 1

            if self._limit_counts[i] >= max_count and not self._limit_enabled[i]:
                self._limit_enabled[i] = True
                for box in self.pin_boxes:
                    for k, device_enum in enumerate(box.enum_index):
                        if device_enum == limited and box.current_dev_enum != current:
                            box.set_index_status(k, False)

            if self._limit_enabled[i] and self._limit_counts[i] < max_count:
                self._limit_enabled[i] = False
                for box in self.pin_boxes:
                    for k, device_enum in enumerate(box.enum_index):
                        if device_enum == limited:
                            box.set_index_status(k, True)

    def _set_current_config(
        self, current: int, previous: int, pin_number: int, pin_name: str
    ) -> None:
        for kind, members in _SOURCES:
            for member in members:
                if member not in (current, previous):
                    continue
                delta = 1 if member == current else -1
                if kind == SourceKind.AXIS_SOURCE:
                    self._emit_axes_source(pin_number - 1, pin_name, delta > 0)
                self.current_config.set_config(kind, delta)

    def _block_pa8_pwm(self, current: int, previous: int) -> None:
        """PWM on PA8 is only available while no SPI pin is selected."""
        if current in _SPI_TYPES:
            self._spi_count += 1
        elif previous in _SPI_TYPES:
            self._spi_count -= 1

        pa8 = self.pin_boxes[_PA8_INDEX]
        blocked = self._spi_count > 0
        if blocked and pa8.current_dev_enum == PinType.LED_PWM:
            pa8.reset_pin()
        for i, device_enum in enumerate(pa8.enum_index):
            if device_enum == PinType.LED_PWM:
                pa8.set_index_status(i, not blocked)
                break

    def a2b_count_changed(self, count: int) -> None:
        self.current_config.a2b_count_changed(count)

    def shift_reg_buttons_count_changed(self, count: int) -> None:
        self.current_config.shift_reg_buttons_count_changed(count)

    def limit_is_reached(self) -> bool:
        return self.current_config.limit_is_reached()

    def reset_all_pins(self) -> None:
        for box in self.pin_boxes:
            box.reset_pin()

    def read_from_config(self, config: DeviceConfig) -> None:
        for i, box in enumerate(self.pin_boxes):
            box.read_from_config(config, i)

    def write_to_config(self, config: DeviceConfig) -> None:
        for i, box in enumerate(self.pin_boxes):
            box.write_to_config(config, i)