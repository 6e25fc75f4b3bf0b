import pytest

from uhppote_core.interlock import Interlock


@pytest.mark.parametrize(
    "interlock,expected",
    [
        (Interlock.NONE, "disabled"),
        (Interlock.DOORS_12, "1&2"),
        (Interlock.DOORS_34, "3&4"),
        (Interlock.DOORS_12_34, "1&2,3&4"),
        (Interlock.DOORS_123, "1&2&3"),
        (Interlock.DOORS_1234, "1&2&3&4"),
    ],
)
def test_interlock_string(interlock, expected):
    assert str(interlock) == expected
    assert f"{interlock}" == expected


def test_interlock_from_wire_value():
    assert Interlock(0x03) is Interlock.DOORS_12_34
    assert Interlock(0x08) is Interlock.DOORS_1234


@pytest.mark.parametrize("interlock", list(Interlock))
def test_interlock_value_round_trip(interlock):
    assert Interlock(int(interlock)) is interlock


def test_interlock_invalid_value():
    with pytest.raises(ValueError):
        Interlock(0x05)