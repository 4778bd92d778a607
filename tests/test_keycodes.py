import pytest

from physixal.keycodes import KeyCode, MouseCode


def test_letters_follow_ascii():
    assert KeyCode(ord("A")) is KeyCode.A
    assert KeyCode(ord("Z")) is KeyCode.Z
    assert [KeyCode(ord(c)) for c in "ABC"] == [KeyCode.A, KeyCode.B, KeyCode.C]


def test_digits_follow_ascii():
    digits = [KeyCode(ord(c)) for c in "0159"]
    assert digits == [KeyCode.D0, KeyCode.D1, KeyCode.D5, KeyCode.D9]


def test_function_and_modifier_keys():
    assert KeyCode(256) is KeyCode.ESCAPE
    assert KeyCode(314) is KeyCode.F25
    assert KeyCode(340) is KeyCode.LEFT_SHIFT
    assert KeyCode(348) is KeyCode.MENU


def test_key_lookup_by_value():
    assert KeyCode(262) is KeyCode.RIGHT
    assert KeyCode(32) is KeyCode.SPACE


def test_unknown_key_value_rejected():
    with pytest.raises(ValueError):
        KeyCode(1)


def test_key_text_is_number():
    assert str(KeyCode(32)) == "32"
    assert f"{KeyCode(87)}" == "87"


def test_mouse_aliases():
    assert MouseCode(0) is MouseCode.BUTTON_LEFT
    assert MouseCode(1) is MouseCode.BUTTON_RIGHT
    assert MouseCode(2) is MouseCode.BUTTON_MIDDLE
    assert MouseCode(7) is MouseCode.BUTTON_LAST


def test_mouse_members_are_unique_buttons():
    assert [int(m) for m in MouseCode] == list(range(8))
    assert str(MouseCode(1)) == "1"