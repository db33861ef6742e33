import pytest

from joyconf.encoders import NOT_DEFINED, Encoder, EncodersConfig
from joyconf.model import MAX_ENCODERS_NUM, DeviceConfig, EncoderType


def test_encoder_number_skips_fast_slot():
    config = DeviceConfig()
    encoder = Encoder(0)
    encoder.type_index = 2
    encoder.write_to_config(config)
    assert config.encoders[1] == 2
    assert config.encoders[0] == EncoderType.ENCODER_CONF_1X


def test_encoder_inputs_and_enabled_state():
    encoder = Encoder(3)
    encoder.set_input_a(5)
    assert encoder.label_a == "Button № 5"
    assert encoder.enabled is False
    encoder.set_input_b(6)
    assert encoder.enabled is True
    encoder.set_input_a(0)
    assert encoder.label_a == NOT_DEFINED
    assert encoder.input_a == 0
    assert encoder.enabled is False


def test_encoder_invalid_type_raises():
    config = DeviceConfig()
    config.encoders[1] = 7
    with pytest.raises(ValueError):
        Encoder(0).read_from_config(config)


def test_config_has_one_less_than_max_encoders():
    assert len(EncodersConfig().encoders) == MAX_ENCODERS_NUM - 1


def test_inputs_are_kept_sorted():
    page = EncodersConfig()
    page.encoder_input_changed(5, 0)
    page.encoder_input_changed(3, 0)
    page.encoder_input_changed(9, 0)
    assert [e.input_a for e in page.encoders[:4]] == [3, 5, 9, 0]
    assert page.input_a_count == 3


def test_remove_input_shifts_following():
    page = EncodersConfig()
    for number in (3, 5, 9):
        page.encoder_input_changed(0, number)
    page.encoder_input_changed(0, -5)
    assert [e.input_b for e in page.encoders[:3]] == [3, 9, 0]
    assert page.input_b_count == 2


def test_encoder_enabled_when_both_inputs_present():
    page = EncodersConfig()
    page.encoder_input_changed(2, 0)
    assert page.encoders[0].enabled is False
    page.encoder_input_changed(0, 4)
    assert page.encoders[0].enabled is True
    page.encoder_input_changed(-2, 0)
    assert page.encoders[0].enabled is False


def test_fast_encoder_selection():
    page = EncodersConfig()
    page.fast_encoder_selected("Pin A8", True)
    assert page.fast_label_a == "Pin A8"
    assert page.fast_enabled is False
    page.fast_encoder_selected("Pin A9", True)
    assert page.fast_label_b == "Pin A9"
    assert page.fast_enabled is True
    page.fast_encoder_selected("Pin A8", False)
    assert page.fast_label_a == NOT_DEFINED
    assert page.fast_enabled is False


def test_fast_type_names_exclude_1x():
    assert EncodersConfig().fast_type_names == ("Encoder 2x", "Encoder 4x")


def test_config_round_trip():
    config = DeviceConfig()
    config.encoders[0] = EncoderType.ENCODER_CONF_4X
    config.encoders[3] = EncoderType.ENCODER_CONF_2X
    page = EncodersConfig()
    page.read_from_config(config)
    assert page.fast_type_index == EncoderType.ENCODER_CONF_4X - 1
    assert page.encoders[2].type_index == EncoderType.ENCODER_CONF_2X
    out = DeviceConfig()
    page.write_to_config(out)
    assert out.encoders == config.encoders


def test_fast_encoder_1x_rejected():
    config = DeviceConfig()
    config.encoders[0] = EncoderType.ENCODER_CONF_1X
    with pytest.raises(ValueError):
        EncodersConfig().read_from_config(config)