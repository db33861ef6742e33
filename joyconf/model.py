"""Device configuration model: enumerations, limits and report decoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAJOR_VERSION = 1
MINOR_VERSION = 7
PATCH_VERSION = 1
BUILD_VERSION = 4

PINS_COUNT = 30
MAX_BUTTONS_NUM = 128
MAX_ENCODERS_NUM = 16
MAX_LEDS_NUM = 24
MAX_SHIFT_REG_NUM = 4
MAX_AXIS_NUM = 8
SHIFT_CONFIG_COUNT = 5
LED_PWM_COUNT = 4
TIMER_COUNT = 4
SHIFT_COUNT = 6
BUTTON_DATA_BYTES = MAX_BUTTONS_NUM // 8


def app_version() -> str:
    """Return the application version string, e.g. ``1.7.1b4``."""
    return f"{MAJOR_VERSION}.{MINOR_VERSION}.{PATCH_VERSION}b{BUILD_VERSION}"


class PinType(IntEnum):
    """Function assigned to a controller pin."""

    NOT_USED = 0
    BUTTON_GND = 1
    BUTTON_VCC = 2
    BUTTON_ROW = 3
    BUTTON_COLUMN = 4
    SHIFT_REG_LATCH = 5
    SHIFT_REG_DATA = 6
    SHIFT_REG_CLK = 7
    TLE5011_CS = 8
    TLE5012_CS = 9
    MCP3201_CS = 10
    MCP3202_CS = 11
    MCP3204_CS = 12
    MCP3208_CS = 13
    MLX90393_CS = 14
    MLX90363_CS = 15
    AS5048A_CS = 16
    LED_SINGLE = 17
    LED_ROW = 18
    LED_COLUMN = 19
    LED_PWM = 20
    AXIS_ANALOG = 21
    FAST_ENCODER = 22
    SPI_SCK = 23
    SPI_MOSI = 24
    SPI_MISO = 25
    TLE5011_GEN = 26
    I2C_SCL = 27
    I2C_SDA = 28


class ButtonType(IntEnum):
    """Function of a logical button."""

    BUTTON_NORMAL = 0
    BUTTON_TOGGLE = 1
    TOGGLE_SWITCH = 2
    TOGGLE_SWITCH_ON = 3
    TOGGLE_SWITCH_OFF = 4
    POV1_UP = 5
    POV1_RIGHT = 6
    POV1_DOWN = 7
    POV1_LEFT = 8
    POV1_CENTER = 9
    POV2_UP = 10
    POV2_RIGHT = 11
    POV2_DOWN = 12
    POV2_LEFT = 13
    POV2_CENTER = 14
    POV3_UP = 15
    POV3_RIGHT = 16
    POV3_DOWN = 17
    POV3_LEFT = 18
    POV4_UP = 19
    POV4_RIGHT = 20
    POV4_DOWN = 21
    POV4_LEFT = 22
    ENCODER_INPUT_A = 23
    ENCODER_INPUT_B = 24
    RADIO_BUTTON1 = 25
    RADIO_BUTTON2 = 26
    RADIO_BUTTON3 = 27
    RADIO_BUTTON4 = 28
    SEQUENTIAL_TOGGLE = 29
    SEQUENTIAL_BUTTON = 30


class TimerIndex(IntEnum):
    """Button timer selector."""

    BUTTON_TIMER_OFF = 0
    BUTTON_TIMER_1 = 1
    BUTTON_TIMER_2 = 2
    BUTTON_TIMER_3 = 3


class EncoderType(IntEnum):
    """Encoder resolution."""

    ENCODER_CONF_1X = 0
    ENCODER_CONF_2X = 1
    ENCODER_CONF_4X = 2


class LedType(IntEnum):
    """LED output polarity."""

    LED_NORMAL = 0
    LED_INVERTED = 1


class ShiftRegType(IntEnum):
    """Shift register chip and pull direction."""

    HC165_PULL_DOWN = 0
    CD4021_PULL_DOWN = 1
    HC165_PULL_UP = 2
    CD4021_PULL_UP = 3


TIMERS: tuple[tuple[TimerIndex, str], ...] = (
    (TimerIndex.BUTTON_TIMER_OFF, "-"),
    (TimerIndex.BUTTON_TIMER_1, "Timer 1"),
    (TimerIndex.BUTTON_TIMER_2, "Timer 2"),
    (TimerIndex.BUTTON_TIMER_3, "Timer 3"),
)

SHIFTS: tuple[tuple[int, str], ...] = (
    (0, "-"),
    (1, "Shift 1"),
    (2, "Shift 2"),
    (3, "Shift 3"),
    (4, "Shift 4"),
    (5, "Shift 5"),
)

LOGIC_FUNCTIONS: tuple[tuple[ButtonType, str], ...] = (
    (ButtonType.BUTTON_NORMAL, "Button normal"),
    (ButtonType.BUTTON_TOGGLE, "Button toggle"),
    (ButtonType.TOGGLE_SWITCH, "Toggle switch ON/OFF"),
    (ButtonType.TOGGLE_SWITCH_ON, "Toggle switch ON"),
    (ButtonType.TOGGLE_SWITCH_OFF, "Toggle switch OFF"),
    (ButtonType.POV1_UP, "POV1 Up"),
    (ButtonType.POV1_RIGHT, "POV1 Right"),
    (ButtonType.POV1_DOWN, "POV1 Down"),
    (ButtonType.POV1_LEFT, "POV1 Left"),
    (ButtonType.POV1_CENTER, "POV1 Center"),
    (ButtonType.POV2_UP, "POV2 Up"),
    (ButtonType.POV2_RIGHT, "POV2 Right"),
    (ButtonType.POV2_DOWN, "POV2 Down"),
    (ButtonType.POV2_LEFT, "POV2 Left"),
    (ButtonType.POV2_CENTER, "POV2 Center"),
    (ButtonType.POV3_UP, "POV3 Up"),
    (ButtonType.POV3_RIGHT, "POV3 Right"),
    (ButtonType.POV3_DOWN, "POV3 Down"),
    (ButtonType.POV3_LEFT, "POV3 Left"),
    (ButtonType.POV4_UP, "POV4 Up"),
    (ButtonType.POV4_RIGHT, "POV4 Right"),
    (ButtonType.POV4_DOWN, "POV4 Down"),
    (ButtonType.POV4_LEFT, "POV4 Left"),
    (ButtonType.ENCODER_INPUT_A, "Encoder A"),
    (ButtonType.ENCODER_INPUT_B, "Encoder B"),
    (ButtonType.RADIO_BUTTON1, "Radio button 1"),
    (ButtonType.RADIO_BUTTON2, "Radio button 2"),
    (ButtonType.RADIO_BUTTON3, "Radio button 3"),
    (ButtonType.RADIO_BUTTON4, "Radio button 4"),
    (ButtonType.SEQUENTIAL_TOGGLE, "Sequential toggle"),
    (ButtonType.SEQUENTIAL_BUTTON, "Sequential button"),
)


@dataclass
class Button:
    """Configuration of one logical button."""

    physical_num: int = -1
    is_disabled: bool = False
    is_inverted: bool = False
    type: int = ButtonType.BUTTON_NORMAL
    shift_modificator: int = 0
    delay_timer: int = TimerIndex.BUTTON_TIMER_OFF
    press_timer: int = TimerIndex.BUTTON_TIMER_OFF


@dataclass
class ShiftConfig:
    """Logical button acting as a shift modifier."""

    button: int = -1


@dataclass
class Led:
    """Configuration of one LED output."""

    input_num: int = -1
    type: int = LedType.LED_NORMAL


@dataclass
class LedPwm:
    """PWM output channel settings."""

    duty_cycle: int = 0
    is_axis: bool = False
    axis_num: int = 0


@dataclass
class ShiftRegisterConfig:
    """Configuration of one shift register chain."""

    type: int = ShiftRegType.HC165_PULL_DOWN
    button_cnt: int = 0


@dataclass
class DeviceConfig:
    """Complete device configuration edited by the configurator."""

    pins: list[int] = field(default_factory=lambda: [PinType.NOT_USED] * PINS_COUNT)
    buttons: list[Button] = field(
        default_factory=lambda: [Button() for _ in range(MAX_BUTTONS_NUM)]
    )
    shift_config: list[ShiftConfig] = field(
        default_factory=lambda: [ShiftConfig() for _ in range(SHIFT_CONFIG_COUNT)]
    )
    button_timer1_ms: int = 0
    button_timer2_ms: int = 0
    button_timer3_ms: int = 0
    button_debounce_ms: int = 0
    a2b_debounce_ms: int = 0
    encoder_press_time_ms: int = 0
    encoders: list[int] = field(
        default_factory=lambda: [EncoderType.ENCODER_CONF_1X] * MAX_ENCODERS_NUM
    )
    leds: list[Led] = field(default_factory=lambda: [Led() for _ in range(MAX_LEDS_NUM)])
    led_pwm_config: list[LedPwm] = field(
        default_factory=lambda: [LedPwm() for _ in range(LED_PWM_COUNT)]
    )
    shift_registers: list[ShiftRegisterConfig] = field(
        default_factory=lambda: [ShiftRegisterConfig() for _ in range(MAX_SHIFT_REG_NUM)]
    )


def _bit(data: bytes | bytearray, index: int) -> bool:
    if not 0 <= index < len(data) * 8:
        raise IndexError(f"bit index {index} out of range")
    return bool(data[index // 8] & (1 << (index % 8)))


@dataclass
class ParamsReport:
    """Live state report sent by the device."""

    log_button_data: bytearray = field(default_factory=lambda: bytearray(BUTTON_DATA_BYTES))
    phy_button_data: bytearray = field(default_factory=lambda: bytearray(BUTTON_DATA_BYTES))
    shift_button_data: int = 0

    def logical_button(self, index: int) -> bool:
        """Whether logical button ``index`` is pressed."""
        return _bit(self.log_button_data, index)

    def physical_button(self, index: int) -> bool:
        """Whether physical button ``index`` is pressed."""
        return _bit(self.phy_button_data, index)

    def shift_active(self, index: int) -> bool:
        """Whether shift ``index`` is active."""
        if not 0 <= index < 8:
            raise IndexError(f"shift index {index} out of range")
        return bool(self.shift_button_data & (1 << index))