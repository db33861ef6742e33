"""Encoder editors: the fast hardware encoder and the button-driven encoders."""

from __future__ import annotations

from joyconf.model import MAX_ENCODERS_NUM, DeviceConfig, EncoderType

NOT_DEFINED = "Not defined"
FAST_ENCODER_COUNT = 1

ENCODER_TYPES: tuple[tuple[EncoderType, str], ...] = (
    (EncoderType.ENCODER_CONF_1X, "Encoder 1x"),
    (EncoderType.ENCODER_CONF_2X, "Encoder 2x"),
    (EncoderType.ENCODER_CONF_4X, "Encoder 4x"),
)

# The fast encoder cannot run in 1x mode.
FAST_ENCODER_TYPES: tuple[tuple[EncoderType, str], ...] = ENCODER_TYPES[1:]


def _button_label(number: int) -> str:
    return f"Button № {number}"


class Encoder:
    """One encoder fed by two logical buttons (inputs A and B)."""

    def __init__(self, encoders_number: int) -> None:
        # Slot 0 of the device table belongs to the fast encoder.
        self.number = encoders_number + 1
        self.input_a = 0
        self.input_b = 0
        self.label_a = NOT_DEFINED
        self.label_b = NOT_DEFINED
        self.enabled = False
        self.type_index = 0

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(name for _, name in ENCODER_TYPES)

    def set_input_a(self, input_a: int) -> None:
        """Set the logical button number of input A; 0 clears it."""
        self.input_a = input_a
        self.label_a = _button_label(input_a) if input_a != 0 else NOT_DEFINED
        self._update_enabled()

    def set_input_b(self, input_b: int) -> None:
        """Set the logical button number of input B; 0 clears it."""
        self.input_b = input_b
        self.label_b = _button_label(input_b) if input_b != 0 else NOT_DEFINED
        self._update_enabled()

    def _update_enabled(self) -> None:
        self.enabled = self.input_a > 0 and self.input_b > 0

    def read_from_config(self, config: DeviceConfig) -> None:
        value = int(config.encoders[self.number])
        if not 0 <= value < len(ENCODER_TYPES):
            raise ValueError(f"unknown encoder type {value}")
        self.type_index = value

    def write_to_config(self, config: DeviceConfig) -> None:
        config.encoders[self.number] = self.type_index


class EncodersConfig:
    """Encoder page: the fast encoder pins and the list of button encoders."""

    def __init__(self) -> None:
        self.encoders: list[Encoder] = [
            Encoder(i) for i in range(MAX_ENCODERS_NUM - FAST_ENCODER_COUNT)
        ]
        self.input_a_count = 0
        self.input_b_count = 0
        self.fast_label_a = NOT_DEFINED
        self.fast_label_b = NOT_DEFINED
        self.fast_input_a = 0
        self.fast_input_b = 0
        self.fast_enabled = False
        self.fast_type_index = 0

    @property
    def fast_type_names(self) -> tuple[str, ...]:
        return tuple(name for _, name in FAST_ENCODER_TYPES)

    def fast_encoder_selected(self, pin_gui_name: str, is_selected: bool) -> None:
        """A pin was assigned to or released from the fast encoder."""
        if is_selected:
            if self.fast_label_a == NOT_DEFINED:
                self.fast_label_a = pin_gui_name
                self.fast_input_a += 1
            else:
                self.fast_label_b = pin_gui_name
                self.fast_input_b += 1
        elif self.fast_label_a == pin_gui_name:
            self.fast_label_a = NOT_DEFINED
            self.fast_input_a -= 1
        else:
            self.fast_label_b = NOT_DEFINED
            self.fast_input_b -= 1
        self.fast_enabled = self.fast_input_a > 0 and self.fast_input_b > 0

    def encoder_input_changed(self, encoder_a: int, encoder_b: int) -> None:
        """Insert (positive) or remove (negative) a button number for input A or B.

        Inputs are kept in ascending order across the encoder list.
        """
        if encoder_a > 0:
            self.input_a_count += 1
            self._insert(encoder_a, "input_a", Encoder.set_input_a, self.input_a_count)
        elif encoder_a < 0:
            self._remove(-encoder_a, "input_a", Encoder.set_input_a, self.input_a_count)
            self.input_a_count -= 1

        if encoder_b > 0:
            self.input_b_count += 1
            self._insert(encoder_b, "input_b", Encoder.set_input_b, self.input_b_count)
        elif encoder_b < 0:
            self._remove(-encoder_b, "input_b", Encoder.set_input_b, self.input_b_count)
            self.input_b_count -= 1

    def _insert(self, value: int, attr: str, setter, count: int) -> None:
        for encoder in self.encoders[:count]:
            existing = getattr(encoder, attr)
            if value < existing or existing == 0:
                setter(encoder, value)
                if existing != 0:
                    value = existing

    def _remove(self, value: int, attr: str, setter, count: int) -> None:
        for i, encoder in enumerate(self.encoders[:count]):
            if getattr(encoder, attr) != value:
                continue
            for j in range(i, count):
                following = (
                    getattr(self.encoders[j + 1], attr) if j + 1 < len(self.encoders) else 0
                )
                setter(self.encoders[j], following)
            break

    def read_from_config(self, config: DeviceConfig) -> None:
        index = int(config.encoders[0]) - 1
        if not 0 <= index < len(FAST_ENCODER_TYPES):
            raise ValueError(f"unsupported fast encoder type {config.encoders[0]}")
        self.fast_type_index = index
        for encoder in self.encoders:
            encoder.read_from_config(config)

    def write_to_config(self, config: DeviceConfig) -> None:
        config.encoders[0] = self.fast_type_index + 1
        for encoder in self.encoders:
            encoder.write_to_config(config)