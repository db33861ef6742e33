"""LED editors: per-LED input binding and the PWM output channels."""

from __future__ import annotations

from dataclasses import replace

from joyconf.model import (
    LED_PWM_COUNT,
    MAX_LEDS_NUM,
    DeviceConfig,
    LedPwm,
    LedType,
    ParamsReport,
)

LED_FUNCTIONS: tuple[tuple[LedType, str], ...] = (
    (LedType.LED_NORMAL, "Normal"),
    (LedType.LED_INVERTED, "Inverted"),
)

PWM_PINS: tuple[str, ...] = ("PA8", "PB0", "PB1", "PB4")


class LedWidget:
    """One LED: the logical button it follows and its polarity."""

    def __init__(self, led_number: int) -> None:
        self.led_number = led_number
        self.input_number = 0
        self.function_index = 0
        self.current_state = False
        self.highlighted = False
        self.hidden = True

    @property
    def number(self) -> int:
        return self.led_number + 1

    @property
    def function_names(self) -> tuple[str, ...]:
        return tuple(name for _, name in LED_FUNCTIONS)

    def current_button_selected(self) -> int:
        """Zero-based logical button index the LED follows; -1 if none."""
        return self.input_number - 1

    def set_led_state(self, state: bool) -> None:
        if state != self.current_state:
            self.highlighted = state
            self.current_state = state

    def read_from_config(self, config: DeviceConfig) -> None:
        led = config.leds[self.led_number]
        self.input_number = led.input_num + 1
        self.function_index = int(led.type)

    def write_to_config(self, config: DeviceConfig) -> None:
        led = config.leds[self.led_number]
        led.input_num = self.input_number - 1
        led.type = self.function_index


class LedConfig:
    """LED page: the visible LEDs and the four PWM channels."""

    def __init__(self) -> None:
        self.leds: list[LedWidget] = [LedWidget(i) for i in range(MAX_LEDS_NUM)]
        self.pwm: list[LedPwm] = [LedPwm() for _ in range(LED_PWM_COUNT)]

    @property
    def visible_count(self) -> int:
        return sum(not led.hidden for led in self.leds)

    def spawn_leds(self, led_count: int) -> None:
        """Show the first ``led_count`` LEDs; counts above the maximum are ignored."""
        if led_count > MAX_LEDS_NUM:
            return
        for i, led in enumerate(self.leds):
            led.hidden = i >= led_count

    def set_leds_state(self, config: DeviceConfig, report: ParamsReport) -> None:
        """Light each configured LED whose logical button is pressed."""
        for i, led_cfg in enumerate(config.leds):
            if led_cfg.input_num <= -1 or i >= len(self.leds):
                break
            widget = self.leds[i]
            if widget.current_button_selected() == led_cfg.input_num:
                widget.set_led_state(report.logical_button(led_cfg.input_num))

    def read_from_config(self, config: DeviceConfig) -> None:
        self.pwm = [replace(channel) for channel in config.led_pwm_config]
        for led in self.leds:
            led.read_from_config(config)

    def write_to_config(self, config: DeviceConfig) -> None:
        config.led_pwm_config = [replace(channel) for channel in self.pwm]
        for led in self.leds:
            if led.hidden:
                break
            led.write_to_config(config)