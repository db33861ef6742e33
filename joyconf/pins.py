"""Pin table and the per-pin function selector."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from joyconf.model import PINS_COUNT, DeviceConfig, PinType

Color = tuple[int, int, int]

_SLOTS = 10


class _Loc(IntEnum):
    PA_0 = 1
    PA_1 = 2
    PA_2 = 3
    PA_3 = 4
    PA_4 = 5
    PA_5 = 6
    PA_6 = 7
    PA_7 = 8
    PA_8 = 9
    PA_9 = 10
    PA_10 = 11
    PA_15 = 12
    PB_0 = 13
    PB_1 = 14
    PB_3 = 15
    PB_4 = 16
    PB_5 = 17
    PB_6 = 18
    PB_7 = 19
    PB_8 = 20
    PB_9 = 21
    PB_10 = 22
    PB_11 = 23
    PB_12 = 24
    PB_13 = 25
    PB_14 = 26
    PB_15 = 27
    PC_13 = 28
    PC_14 = 29
    PC_15 = 30
    ANALOG_IN = 31
    FAST_ENCODER_PIN = 32
    LED_PWM_PIN = 33
    I2C1_SDA = 34
    I2C1_SCL = 35
    I2C2_SDA = 36
    I2C2_SCL = 37
    SPI1_MOSI = 38
    SPI1_MISO = 39
    SPI1_SCK = 40
    SPI1_NSS = 41
    SPI2_MOSI = 42
    SPI2_MISO = 43
    SPI2_SCK = 44
    SPI2_NSS = 45
    ALL = 999


@dataclass(frozen=True)
class PinInfo:
    """A physical pin: its number, short name, display name and capabilities."""

    pin: int
    object_name: str
    gui_name: str
    capabilities: tuple[int, ...] = ()


@dataclass(frozen=True)
class PinTypeEntry:
    """A selectable pin function and the pins it may be placed on."""

    device_enum: PinType
    gui_name: str
    pin_types: tuple[int, ...]
    excepts: tuple[int, ...] = ()
    interaction: tuple[int, ...] = ()
    color: Color | None = None


def _pin(loc: _Loc, name: str, *caps: int) -> PinInfo:
    return PinInfo(int(loc), name, f"Pin {name}", tuple(int(c) for c in caps))


_PIN_LIST: tuple[PinInfo, ...] = (
    _pin(_Loc.PA_0, "A0", _Loc.ANALOG_IN),
    _pin(_Loc.PA_1, "A1", _Loc.ANALOG_IN),
    _pin(_Loc.PA_2, "A2", _Loc.ANALOG_IN),
    _pin(_Loc.PA_3, "A3", _Loc.ANALOG_IN),
    _pin(_Loc.PA_4, "A4", _Loc.ANALOG_IN),
    _pin(_Loc.PA_5, "A5", _Loc.ANALOG_IN),
    _pin(_Loc.PA_6, "A6", _Loc.ANALOG_IN),
    _pin(_Loc.PA_7, "A7", _Loc.ANALOG_IN),
    _pin(_Loc.PA_8, "A8"),
    _pin(_Loc.PA_9, "A9"),
    _pin(_Loc.PA_10, "A10"),
    _pin(_Loc.PA_15, "A15", _Loc.SPI1_NSS),
    _pin(_Loc.PB_0, "B0"),
    _pin(_Loc.PB_1, "B1"),
    _pin(_Loc.PB_3, "B3", _Loc.SPI1_SCK),
    _pin(_Loc.PB_4, "B4", _Loc.SPI1_MISO),
    _pin(_Loc.PB_5, "B5", _Loc.SPI1_MOSI),
    _pin(_Loc.PB_6, "B6"),
    _pin(_Loc.PB_7, "B7"),
    _pin(_Loc.PB_8, "B8", _Loc.I2C1_SCL),
    _pin(_Loc.PB_9, "B9", _Loc.I2C1_SDA),
    _pin(_Loc.PB_10, "B10", _Loc.I2C2_SCL),
    _pin(_Loc.PB_11, "B11", _Loc.I2C2_SDA),
    _pin(_Loc.PB_12, "B12"),
    _pin(_Loc.PB_13, "B13"),
    _pin(_Loc.PB_14, "B14"),
    _pin(_Loc.PB_15, "B15"),
    _pin(_Loc.PC_13, "C13"),
    _pin(_Loc.PC_14, "C14"),
    _pin(_Loc.PC_15, "C15"),
)

_ALL = (int(_Loc.ALL),)
_SPI_CS_EXCEPT = (int(_Loc.SPI1_SCK), int(_Loc.SPI1_MOSI), int(_Loc.SPI1_MISO))
_SPI_CS_INTERACT = (PinType.SPI_SCK, PinType.SPI_MOSI, PinType.SPI_MISO)
_SPI_COLOR = (53, 153, 120)


def _spi_cs(device: PinType, name: str) -> PinTypeEntry:
    return PinTypeEntry(device, name, _ALL, _SPI_CS_EXCEPT, _SPI_CS_INTERACT, _SPI_COLOR)


_PIN_TYPES: tuple[PinTypeEntry, ...] = (
    PinTypeEntry(PinType.NOT_USED, "Not Used", _ALL),
    PinTypeEntry(PinType.BUTTON_GND, "Button Gnd", _ALL, color=(25, 130, 240)),
    PinTypeEntry(PinType.BUTTON_VCC, "Button Vcc", _ALL, color=(170, 170, 0)),
    PinTypeEntry(PinType.BUTTON_ROW, "Button Row", _ALL, color=(120, 130, 250)),
    PinTypeEntry(PinType.BUTTON_COLUMN, "Button Column", _ALL, color=(120, 130, 250)),
    PinTypeEntry(PinType.SHIFT_REG_LATCH, "ShiftReg LATCH", _ALL, color=(105, 180, 55)),
    PinTypeEntry(PinType.SHIFT_REG_DATA, "ShiftReg DATA", _ALL, color=(105, 180, 55)),
    PinTypeEntry(PinType.SHIFT_REG_CLK, "ShiftReg CLK", _ALL, color=(105, 180, 55)),
    PinTypeEntry(
        PinType.TLE5011_CS, "TLE5011 CS", _ALL,
        (int(_Loc.SPI1_SCK), int(_Loc.SPI1_MOSI)),
        (PinType.SPI_SCK, PinType.SPI_MOSI, PinType.TLE5011_GEN), _SPI_COLOR,
    ),
    PinTypeEntry(
        PinType.TLE5012_CS, "TLE5012B CS", _ALL,
        (int(_Loc.SPI1_SCK), int(_Loc.SPI1_MOSI)),
        (PinType.SPI_SCK, PinType.SPI_MOSI, PinType.TLE5011_GEN), _SPI_COLOR,
    ),
    _spi_cs(PinType.MCP3201_CS, "MCP3201 CS"),
    _spi_cs(PinType.MCP3202_CS, "MCP3202 CS"),
    _spi_cs(PinType.MCP3204_CS, "MCP3204 CS"),
    _spi_cs(PinType.MCP3208_CS, "MCP3208 CS"),
    _spi_cs(PinType.MLX90393_CS, "MLX90393 CS"),
    _spi_cs(PinType.MLX90363_CS, "MLX90363 CS"),
    _spi_cs(PinType.AS5048A_CS, "AS5048A CS"),
    PinTypeEntry(PinType.LED_SINGLE, "LED Single", _ALL, color=(200, 150, 70)),
    PinTypeEntry(PinType.LED_ROW, "LED Row", _ALL, color=(200, 130, 70)),
    PinTypeEntry(PinType.LED_COLUMN, "LED Column", _ALL, color=(200, 130, 70)),
    PinTypeEntry(
        PinType.LED_PWM, "LED PWM",
        (int(_Loc.PA_8), int(_Loc.PB_0), int(_Loc.PB_1), int(_Loc.PB_4)),
        color=(200, 90, 70),
    ),
    PinTypeEntry(PinType.AXIS_ANALOG, "Axis Analog", (int(_Loc.ANALOG_IN),), color=(0, 160, 0)),
    PinTypeEntry(
        PinType.FAST_ENCODER, "Fast Encoder", (int(_Loc.PA_8), int(_Loc.PA_9)),
        color=(55, 150, 25),
    ),
    PinTypeEntry(PinType.SPI_SCK, "SPI SCK", (int(_Loc.SPI1_SCK),), color=_SPI_COLOR),
    PinTypeEntry(PinType.SPI_MOSI, "SPI MOSI", (int(_Loc.SPI1_MOSI),), color=_SPI_COLOR),
    PinTypeEntry(PinType.SPI_MISO, "SPI MISO", (int(_Loc.SPI1_MISO),), color=_SPI_COLOR),
    PinTypeEntry(PinType.TLE5011_GEN, "TLE5011 GEN", (int(_Loc.PB_6),), color=_SPI_COLOR),
    PinTypeEntry(
        PinType.I2C_SCL, "I2C SCL", (int(_Loc.I2C2_SCL),),
        interaction=(PinType.I2C_SDA,), color=(90, 155, 140),
    ),
    PinTypeEntry(
        PinType.I2C_SDA, "I2C SDA", (int(_Loc.I2C2_SDA),),
        interaction=(PinType.I2C_SCL,), color=(90, 155, 140),
    ),
)


def pin_list() -> tuple[PinInfo, ...]:
    """All controller pins, ordered by pin number."""
    return _PIN_LIST


def pin_types() -> tuple[PinTypeEntry, ...]:
    """All selectable pin functions."""
    return _PIN_TYPES


def _slot(values: Sequence[int], n: int) -> int:
    return int(values[n]) if n < len(values) else 0


def _item_type_indices(pin_number: int) -> list[int]:
    """Indices into the pin-type table offered on the given pin.

    An excluded type also causes the type following it to be passed over.
    """
    caps = _PIN_LIST[pin_number - 1].capabilities
    count = len(_PIN_TYPES)
    result: list[int] = []
    i = 0
    while i < count:
        skipped = False
        for c in range(_SLOTS):
            if i >= count:
                break
            excepted = _slot(_PIN_TYPES[i].excepts, c)
            if excepted == 0:
                break
            if excepted == pin_number:
                i += 1
                skipped = True
                break
            if excepted in caps:
                i += 1
                skipped = True
        if skipped:
            i += 1
            continue
        for placed in _PIN_TYPES[i].pin_types:
            if placed == _Loc.ALL or placed == pin_number:
                result.append(i)
                continue
            result.extend(i for cap in caps if cap == placed)
        i += 1
    return result


def _type_index_of(device_enum: int) -> int | None:
    return next(
        (k for k, entry in enumerate(_PIN_TYPES) if entry.device_enum == device_enum), None
    )


InteractionListener = Callable[[int, int, int], None]
IndexListener = Callable[[int, int, int, str], None]


class PinComboBox:
    """Function selector for one pin, with cross-pin interaction requests."""

    def __init__(self, pin_number: int) -> None:
        if not 1 <= pin_number <= PINS_COUNT:
            raise ValueError(f"pin number must be in 1..{PINS_COUNT}, got {pin_number}")
        self.pin_number = pin_number
        self.object_name = _PIN_LIST[pin_number - 1].object_name
        self.interact_count = 0
        self.interaction_listeners: list[InteractionListener] = []
        self.index_listeners: list[IndexListener] = []
        self.enabled = True
        self.text_color: Color | None = None
        self.current_dev_enum: int = PinType.NOT_USED
        self._previous: int = PinType.NOT_USED
        self._is_call_interaction = False
        self._is_interacts = False
        self._call_interaction = 0
        self._type_indices = _item_type_indices(pin_number)
        self._enum_index = [_PIN_TYPES[i].device_enum for i in self._type_indices]
        self._item_enabled = [True] * len(self._type_indices)
        self._current_index = 0

    @property
    def type_indices(self) -> tuple[int, ...]:
        """Index into :func:`pin_types` of every offered item."""
        return tuple(self._type_indices)

    @property
    def enum_index(self) -> tuple[int, ...]:
        """Device function of every offered item."""
        return tuple(self._enum_index)

    @property
    def item_names(self) -> tuple[str, ...]:
        return tuple(_PIN_TYPES[i].gui_name for i in self._type_indices)

    def item_color(self, index: int) -> Color | None:
        """Text colour of an item; the first item keeps the default colour."""
        if index == 0:
            return None
        return _PIN_TYPES[self._type_indices[index]].color

    @property
    def is_interacts(self) -> bool:
        return self._is_interacts

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_text(self) -> str:
        return _PIN_TYPES[self._type_indices[self._current_index]].gui_name

    def set_index_status(self, index: int, enabled: bool) -> None:
        """Enable or disable one item."""
        self._item_enabled[index] = enabled

    def is_index_enabled(self, index: int) -> bool:
        return self._item_enabled[index]

    def reset_pin(self) -> None:
        """Return to "Not Used" and drop any interaction lock."""
        self._set_current_index(0)
        if self._is_interacts:
            self.enabled = True
            self._is_interacts = False

    def set_index_interaction(self, index: int, sender_index: int) -> None:
        """Apply or release a selection requested by another pin."""
        if not self._is_interacts and not self._is_call_interaction:
            if _PIN_TYPES[self._type_indices[index]].device_enum != PinType.TLE5011_GEN:
                self.enabled = False
            self.text_color = _PIN_TYPES[sender_index].color
            self._is_interacts = True
            self._set_current_index(index)
        elif self._is_interacts:
            self.enabled = True
            self._is_interacts = False
            self.text_color = None
            self._set_current_index(index)

    def select(self, index: int) -> None:
        """Select an item as the user would."""
        if not 0 <= index < len(self._type_indices):
            raise IndexError(f"item index {index} out of range")
        self._set_current_index(index)

    def read_from_config(self, config: DeviceConfig, pin: int) -> None:
        """Select the item matching ``config.pins[pin]``, if any."""
        wanted = config.pins[pin]
        for i, device_enum in enumerate(self._enum_index):
            if device_enum == wanted:
                self._set_current_index(i)
                break

    def write_to_config(self, config: DeviceConfig, pin: int) -> None:
        config.pins[pin] = self.current_dev_enum

    def _set_current_index(self, index: int) -> None:
        if index != self._current_index:
            self._current_index = index
            self._index_changed(index)

    def _emit_interaction(self, index: int, sender_index: int) -> None:
        for listener in self.interaction_listeners:
            listener(index, sender_index, self.pin_number)

    def _index_changed(self, index: int) -> None:
        if self._type_indices and not self._is_interacts:
            type_index = self._type_indices[index]
            entry = _PIN_TYPES[type_index]
            self.text_color = None if index == 0 else entry.color

            emitted = 0
            for i in range(_SLOTS):
                if self._is_call_interaction and emitted == 0:
                    self._is_call_interaction = False
                    if _slot(entry.interaction, i) > 0:
                        self._is_call_interaction = True
                        for t in range(_SLOTS):
                            wanted = _slot(entry.interaction, t)
                            if wanted > 0:
                                k = _type_index_of(wanted)
                                if k is not None:
                                    self._emit_interaction(k, type_index)
                    old = _PIN_TYPES[self._call_interaction]
                    for n in range(_SLOTS):
                        wanted = _slot(old.interaction, n)
                        if wanted <= 0:
                            break
                        for m, other in enumerate(_PIN_TYPES):
                            if other.device_enum == wanted:
                                self._emit_interaction(PinType.NOT_USED, m)
                    self._call_interaction = type_index
                    break
                if _slot(entry.interaction, i) > 0:
                    self._is_call_interaction = True
                    k = _type_index_of(_slot(entry.interaction, i))
                    if k is not None:
                        self._call_interaction = type_index
                        self._emit_interaction(k, type_index)
                        emitted += 1

        if self._type_indices:
            current = self._enum_index[index]
            for listener in self.index_listeners:
                listener(current, self._previous, self.pin_number, self.current_text)
            self._previous = current
            self.current_dev_enum = current