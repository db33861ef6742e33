from joyconf.leds import PWM_PINS, LedConfig, LedWidget
from joyconf.model import MAX_LEDS_NUM, DeviceConfig, LedType, ParamsReport


def test_led_function_names():
    assert LedWidget(0).function_names == ("Normal", "Inverted")


def test_led_read_write_round_trip():
    config = DeviceConfig()
    config.leds[2].input_num = 7
    config.leds[2].type = LedType.LED_INVERTED
    led = LedWidget(2)
    led.read_from_config(config)
    assert led.current_button_selected() == 7
    out = DeviceConfig()
    led.write_to_config(out)
    assert out.leds[2] == config.leds[2]


def test_led_state_highlight():
    led = LedWidget(0)
    led.set_led_state(True)
    assert led.highlighted is True
    led.set_led_state(False)
    assert led.highlighted is False
    assert led.current_state is False


def test_spawn_leds_shows_first_count():
    page = LedConfig()
    assert page.visible_count == 0
    page.spawn_leds(3)
    assert [led.hidden for led in page.leds[:4]] == [False, False, False, True]
    page.spawn_leds(1)
    assert page.visible_count == 1


def test_spawn_leds_over_max_ignored():
    page = LedConfig()
    page.spawn_leds(2)
    page.spawn_leds(MAX_LEDS_NUM + 1)
    assert page.visible_count == 2


def test_set_leds_state_follows_report():
    config = DeviceConfig()
    config.leds[0].input_num = 9
    config.leds[1].input_num = 2
    page = LedConfig()
    page.read_from_config(config)
    report = ParamsReport()
    report.log_button_data[1] = 1 << 1
    page.set_leds_state(config, report)
    assert page.leds[0].current_state is True
    assert page.leds[1].current_state is False


def test_set_leds_state_stops_at_unset_led():
    config = DeviceConfig()
    config.leds[1].input_num = 0
    page = LedConfig()
    page.read_from_config(config)
    report = ParamsReport()
    report.log_button_data[0] = 1
    page.set_leds_state(config, report)
    assert page.leds[1].current_state is False


def test_write_stops_at_hidden_led():
    page = LedConfig()
    page.spawn_leds(2)
    for led in page.leds:
        led.input_number = 4
    out = DeviceConfig()
    page.write_to_config(out)
    assert [led.input_num for led in out.leds[:3]] == [3, 3, -1]


def test_pwm_round_trip():
    config = DeviceConfig()
    config.led_pwm_config[3].duty_cycle = 50
    config.led_pwm_config[3].is_axis = True
    config.led_pwm_config[3].axis_num = 2
    page = LedConfig()
    page.read_from_config(config)
    assert len(page.pwm) == len(PWM_PINS)
    out = DeviceConfig()
    page.write_to_config(out)
    assert out.led_pwm_config == config.led_pwm_config
    page.pwm[0].duty_cycle = 10
    assert config.led_pwm_config[0].duty_cycle == 0