import pytest

from joyconf.model import (
    LOGIC_FUNCTIONS,
    MAX_BUTTONS_NUM,
    MAX_ENCODERS_NUM,
    MAX_LEDS_NUM,
    MAX_SHIFT_REG_NUM,
    PINS_COUNT,
    TIMERS,
    ButtonType,
    DeviceConfig,
    ParamsReport,
    PinType,
    app_version,
)


def test_app_version():
    assert app_version() == "1.7.1b4"


def test_device_config_sizes():
    cfg = DeviceConfig()
    assert len(cfg.pins) == PINS_COUNT
    assert len(cfg.buttons) == MAX_BUTTONS_NUM
    assert len(cfg.encoders) == MAX_ENCODERS_NUM
    assert len(cfg.leds) == MAX_LEDS_NUM
    assert len(cfg.shift_registers) == MAX_SHIFT_REG_NUM


def test_device_config_defaults_unassigned():
    cfg = DeviceConfig()
    assert all(b.physical_num == -1 for b in cfg.buttons)
    assert all(led.input_num == -1 for led in cfg.leds)
    assert all(p == PinType.NOT_USED for p in cfg.pins)


def test_device_config_pins_default_to_zero():
    cfg = DeviceConfig()
    assert all(p == 0 for p in cfg.pins)


def test_default_button_uses_first_function_and_timer():
    button = DeviceConfig().buttons[0]
    assert button.type == LOGIC_FUNCTIONS[0][0]
    assert button.type == ButtonType.BUTTON_NORMAL
    assert button.delay_timer == TIMERS[0][0]
    assert button.press_timer == TIMERS[0][0]


def test_device_config_entries_are_independent():
    cfg = DeviceConfig()
    cfg.buttons[0].physical_num = 5
    assert cfg.buttons[1].physical_num == -1
    assert DeviceConfig().buttons[0].physical_num == -1


def test_logical_button_bits():
    data = bytearray(16)
    data[0] = 0x01
    data[-1] = 0x80
    report = ParamsReport(log_button_data=data)
    pressed = [i for i in range(MAX_BUTTONS_NUM) if report.logical_button(i)]
    assert pressed == [0, MAX_BUTTONS_NUM - 1]


def test_physical_button_independent_of_logical():
    report = ParamsReport(phy_button_data=bytearray([0x01] + [0] * 15))
    assert report.physical_button(0) is True
    assert report.logical_button(0) is False


def test_shift_active():
    report = ParamsReport(shift_button_data=0b1)
    assert report.shift_active(0) is True
    assert all(not report.shift_active(i) for i in range(1, 8))


@pytest.mark.parametrize("index", [-1, MAX_BUTTONS_NUM])
def test_button_index_out_of_range(index):
    with pytest.raises(IndexError):
        ParamsReport().logical_button(index)


def test_shift_index_out_of_range():
    with pytest.raises(IndexError):
        ParamsReport().shift_active(8)