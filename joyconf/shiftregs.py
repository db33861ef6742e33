"""Shift register editors and the assignment of latch, clock and data pins to them."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import NamedTuple

from joyconf.model import MAX_SHIFT_REG_NUM, DeviceConfig, ShiftRegType

NOT_DEFINED = "Not defined"

SHIFT_REG_TYPES: tuple[tuple[ShiftRegType, str], ...] = (
    (ShiftRegType.HC165_PULL_DOWN, "HC165 Pull Down"),
    (ShiftRegType.CD4021_PULL_DOWN, "CD4021 Pull Down"),
    (ShiftRegType.HC165_PULL_UP, "HC165 Pull Up"),
    (ShiftRegType.CD4021_PULL_UP, "CD4021 Pull Up"),
)

ButtonCountListener = Callable[[int, int], None]


class ShiftRegister:
    """One shift register chain: its pins, chip type and number of buttons."""

    def __init__(self, shift_reg_number: int) -> None:
        self.shift_reg_number = shift_reg_number
        self.type_index = 0
        self.registers_count = 0
        self.latch_pin = 0
        self.clk_pin = 0
        self.data_pin = 0
        self.latch_label = NOT_DEFINED
        self.clk_label = NOT_DEFINED
        self.data_label = NOT_DEFINED
        self.enabled = True
        self.button_count_listeners: list[ButtonCountListener] = []
        self._button_count = 0
        self._reported_count = 0

    @property
    def number(self) -> int:
        return self.shift_reg_number + 1

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(name for _, name in SHIFT_REG_TYPES)

    @property
    def default_text(self) -> str:
        return NOT_DEFINED

    @property
    def button_count(self) -> int:
        """Number of buttons read through this chain."""
        return self._button_count

    @button_count.setter
    def button_count(self, value: int) -> None:
        value = max(0, value)
        if value != self._button_count:
            self._button_count = value
            self.calc_registers_count(value)

    def calc_registers_count(self, count: int) -> None:
        """Update the chip count for ``count`` buttons and report the change."""
        self.registers_count = math.ceil(count / 8)
        if self.enabled:
            for listener in self.button_count_listeners:
                listener(count, self._reported_count)
            self._reported_count = count

    def set_latch_pin(self, pin: int, pin_gui_name: str) -> None:
        self.latch_pin = pin
        self.latch_label = pin_gui_name if pin != 0 else NOT_DEFINED
        self._update_enabled()

    def set_clk_pin(self, pin: int, pin_gui_name: str) -> None:
        self.clk_pin = pin
        self.clk_label = pin_gui_name if pin != 0 else NOT_DEFINED
        self._update_enabled()

    def set_data_pin(self, pin: int, pin_gui_name: str) -> None:
        self.data_pin = pin
        self.data_label = pin_gui_name if pin != 0 else NOT_DEFINED
        self._update_enabled()

    def _update_enabled(self) -> None:
        if self.latch_pin > 0 and self.clk_pin > 0 and self.data_pin > 0:
            self.enabled = True
        else:
            self.button_count = 0
            self.enabled = False

    def read_from_config(self, config: DeviceConfig) -> None:
        entry = config.shift_registers[self.shift_reg_number]
        type_index = int(entry.type)
        if not 0 <= type_index < len(SHIFT_REG_TYPES):
            raise ValueError(f"unknown shift register type {entry.type}")
        self.type_index = type_index
        self.button_count = entry.button_cnt

    def write_to_config(self, config: DeviceConfig) -> None:
        entry = config.shift_registers[self.shift_reg_number]
        entry.type = self.type_index
        entry.button_cnt = self.button_count


class PinSlot(NamedTuple):
    """A pin selected for one shift register role."""

    pin_number: int
    gui_name: str


def _empty_slots() -> list[PinSlot]:
    return [PinSlot(0, "") for _ in range(MAX_SHIFT_REG_NUM + 1)]


def _sort_slots(slots: list[PinSlot]) -> None:
    slots.sort(key=lambda slot: slot.pin_number)
    slots.sort(key=lambda slot: slot.pin_number == 0)


def _place_pin(pin: int, pin_gui_name: str, slots: list[PinSlot]) -> None:
    """Add (positive) or remove (negative) a pin, then sort with unused slots last."""
    if pin > 0:
        slots[-1] = PinSlot(pin, pin_gui_name)
    else:
        slots[:] = [
            PinSlot(0, NOT_DEFINED) if slot.pin_number == -pin else slot for slot in slots
        ]
    _sort_slots(slots)


class ShiftRegistersConfig:
    """Shift register page: distributes the selected pins over the registers."""

    def __init__(self) -> None:
        self.shift_registers: list[ShiftRegister] = [
            ShiftRegister(i) for i in range(MAX_SHIFT_REG_NUM)
        ]
        for register in self.shift_registers:
            register.button_count_listeners.append(self.shift_reg_buttons_calc)
        self.shift_buttons_count = 0
        self.buttons_count_listeners: list[Callable[[int], None]] = []
        self.latch_slots = _empty_slots()
        self.clk_slots = _empty_slots()
        self.data_slots = _empty_slots()

    def shift_reg_buttons_calc(self, current: int, previous: int) -> None:
        """Track the total number of buttons read through all shift registers."""
        self.shift_buttons_count += current - previous
        for listener in self.buttons_count_listeners:
            listener(self.shift_buttons_count)

    @staticmethod
    def _share_pins(pin: int, pin_gui_name: str, slots: list[PinSlot]) -> None:
        """Place a latch or clock pin; registers past the last pin reuse the last one."""
        _place_pin(pin, pin_gui_name, slots)
        last = max((i for i, slot in enumerate(slots) if slot.pin_number > 0), default=None)
        if last is None:
            return
        back = slots[-1]
        for k in range(len(slots) - 1):
            if slots[k].pin_number == slots[k + 1].pin_number and back.pin_number > 0:
                for j in range(k + 1, len(slots) - 1):
                    slots[j] = back
                break
        for j in range(last + 1, len(slots)):
            slots[j] = slots[last]

    def shift_reg_selected(
        self, latch_pin: int, clk_pin: int, data_pin: int, pin_gui_name: str
    ) -> None:
        """A pin was selected (positive) or released (negative) for one role."""
        if latch_pin != 0:
            self._share_pins(latch_pin, pin_gui_name, self.latch_slots)
            for register, slot in zip(self.shift_registers, self.latch_slots):
                register.set_latch_pin(slot.pin_number, slot.gui_name)
        elif clk_pin != 0:
            self._share_pins(clk_pin, pin_gui_name, self.clk_slots)
            for register, slot in zip(self.shift_registers, self.clk_slots):
                register.set_clk_pin(slot.pin_number, slot.gui_name)
        elif data_pin != 0:
            _place_pin(data_pin, pin_gui_name, self.data_slots)
            for register, slot in zip(self.shift_registers, self.data_slots):
                register.set_data_pin(slot.pin_number, slot.gui_name)

    def read_from_config(self, config: DeviceConfig) -> None:
        for register in self.shift_registers:
            register.read_from_config(config)

    def write_to_config(self, config: DeviceConfig) -> None:
        for register in self.shift_registers:
            register.write_to_config(config)