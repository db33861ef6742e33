from joyconf.switch import (
    MOON_BACKGROUND,
    MOON_DARK_MODE,
    SUN_BACKGROUND,
    SUN_DARK_MODE,
    SUN_LIGHT_MODE,
    SwitchButton,
)


def test_starts_unchecked_with_light_colors():
    switch = SwitchButton()
    assert switch.checked is False
    assert switch.sun_color == SUN_LIGHT_MODE
    assert switch.background == SUN_BACKGROUND


def test_click_toggles_and_reports():
    switch = SwitchButton()
    states = []
    switch.state_listeners.append(states.append)
    switch.mouse_press(True)
    switch.mouse_release(True)
    assert switch.checked is True
    assert states == [True]
    assert switch.sun_color == SUN_DARK_MODE
    assert switch.moon_color == MOON_DARK_MODE
    assert switch.background == MOON_BACKGROUND


def test_release_without_press_does_nothing():
    switch = SwitchButton()
    switch.mouse_release(True)
    assert switch.checked is False


def test_right_button_is_ignored():
    switch = SwitchButton()
    switch.mouse_press(False)
    switch.mouse_release(False)
    assert switch.checked is False
    switch.mouse_press(True)
    switch.mouse_release(False)
    assert switch.mouse_pressed is True
    assert switch.checked is False


def test_set_checked_same_state_is_silent():
    switch = SwitchButton()
    states = []
    switch.state_listeners.append(states.append)
    switch.set_checked(False)
    switch.set_checked(True)
    switch.set_checked(True)
    assert states == [True]


def test_knob_moves_to_right_end():
    switch = SwitchButton()
    switch.resize(60, 30)
    assert switch.half_width == 30.0
    assert switch.knob_center == (15.0, 15.0)
    switch.set_checked(True)
    assert switch.knob_center[0] == switch.width - switch.half_height