import pytest

from joyconf.buttonconfig import BUTTON_TYPE_LIMITS, ButtonConfig
from joyconf.model import ButtonType, DeviceConfig, ParamsReport


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _index_of(bc, button_type):
    return bc.logical_buttons[0]._type_to_index(button_type)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def bc(clock):
    return ButtonConfig(clock=clock)


def test_default_write_matches_default_config(bc):
    cfg = DeviceConfig()
    bc.write_to_config(cfg)
    assert cfg == DeviceConfig()


def test_config_round_trip(bc):
    src = DeviceConfig()
    src.buttons[0].physical_num = 4
    src.buttons[0].type = ButtonType.BUTTON_TOGGLE
    src.buttons[0].is_inverted = True
    src.buttons[1].physical_num = 2
    src.buttons[1].shift_modificator = 3
    src.buttons[1].delay_timer = 2
    src.shift_config[2].button = 7
    src.button_timer2_ms = 250
    src.button_debounce_ms = 20
    src.encoder_press_time_ms = 10
    bc.read_from_config(src)
    assert bc.shift_buttons[2] == 8
    out = DeviceConfig()
    bc.write_to_config(out)
    assert out == src


def test_encoder_input_events(bc):
    events = []
    bc.encoder_input_listeners.append(lambda a, b: events.append((a, b)))
    bc.logical_buttons[2].function_index = _index_of(bc, ButtonType.ENCODER_INPUT_A)
    bc.logical_buttons[2].function_index = _index_of(bc, ButtonType.ENCODER_INPUT_B)
    bc.logical_buttons[2].function_index = 0
    assert events == [(3, 0), (0, 3), (-3, 0), (0, -3)]


def test_type_limit_disables_and_reenables(bc):
    limit = dict(BUTTON_TYPE_LIMITS)[ButtonType.ENCODER_INPUT_A]
    a_index = _index_of(bc, ButtonType.ENCODER_INPUT_A)
    for i in range(limit):
        bc.logical_buttons[i].function_index = a_index
    assert bc.logical_buttons[0].is_function_enabled(a_index)
    assert not bc.logical_buttons[limit].is_function_enabled(a_index)

    bc.logical_buttons[0].function_index = 0
    assert all(b.is_function_enabled(a_index) for b in bc.logical_buttons)


def test_set_ui_on_off(bc):
    bc.set_ui_on_off(20)
    assert len(bc.physical_buttons) == 20
    assert bc.shift_enabled
    assert bc.physical_button_position(9) == (1, 1)
    bc.set_ui_on_off(0)
    assert bc.physical_buttons == []
    assert not bc.shift_enabled
    assert not bc.logical_buttons[0].spin_enabled


def test_physical_position_out_of_range(bc):
    bc.set_ui_on_off(3)
    with pytest.raises(IndexError):
        bc.physical_button_position(3)


def test_set_physic_button_uses_focus(bc):
    bc.set_ui_on_off(10)
    bc.logical_buttons[3].focus_in()
    bc.set_physic_button(4)
    assert bc.logical_buttons[3].physical_number == 5


def test_set_physic_button_ignored_when_disabled(clock):
    bc = ButtonConfig(auto_phys_button=False, clock=clock)
    bc.set_ui_on_off(10)
    bc.logical_buttons[3].focus_in()
    bc.set_physic_button(4)
    assert bc.logical_buttons[3].physical_number == 0
    assert bc.logical_buttons[0].current_focus == -1


def test_physical_press_assigns_focused_button(bc):
    bc.set_ui_on_off(8)
    bc.logical_buttons[1].focus_in()
    report = ParamsReport()
    report.phy_button_data[0] = 0b100
    bc.button_state_changed(report)
    assert bc.physical_buttons[2].current_state
    assert bc.logical_buttons[1].physical_number == 3


def test_logical_states_follow_report(bc, clock):
    report = ParamsReport()
    report.log_button_data[0] = 0b101
    bc.button_state_changed(report)
    assert [b.current_state for b in bc.logical_buttons[:3]] == [True, False, True]
    clock.now += 1.0
    bc.button_state_changed(ParamsReport())
    assert not any(b.current_state for b in bc.logical_buttons)


def test_shift_highlight_and_release(bc):
    report = ParamsReport(shift_button_data=0b10)
    bc.button_state_changed(report)
    assert bc.shift_highlighted == [False, True, False, False, False]
    bc.button_state_changed(ParamsReport())
    assert bc.shift_highlighted == [False] * 5