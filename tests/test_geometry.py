import pytest

from joyconf.geometry import centered_label_offset, info_label_height_for_width


def test_offset_when_text_fits():
    assert centered_label_offset(50, 100, 16, 20) == 35


def test_offset_never_negative():
    assert centered_label_offset(10, 20, 16, 200) == 0


def test_offset_shrinks_when_text_is_too_wide():
    wide = centered_label_offset(100, 200, 20, 150)
    narrow = centered_label_offset(100, 200, 20, 10)
    assert 0 <= wide < narrow
    assert wide + 150 * 1.1 <= 200 - 20 + 1


@pytest.mark.parametrize("text_width", [0, 5, 40, 120, 400])
def test_offset_is_non_negative(text_width):
    assert centered_label_offset(60, 120, 18, text_width) >= 0


def test_height_keeps_aspect_ratio():
    assert info_label_height_for_width(100, 20, 10, 7) == 50


def test_height_without_pixmap_is_current():
    assert info_label_height_for_width(100, 0, 0, 7) == 7


def test_height_truncates():
    assert info_label_height_for_width(10, 3, 1, 0) == 3


def test_square_icon_height_equals_width():
    for width in (1, 12, 99):
        assert info_label_height_for_width(width, 12, 12, 0) == width