import pytest

from uhppote_core.version import Version


@pytest.mark.parametrize(
    "version,expected",
    [
        (0x0662, "v6.62"),
        (0x0892, "v8.92"),
        (0x0898, "v8.98"),
        (0x0800, "v8.00"),
        (0x0801, "v8.01"),
        (0x0810, "v8.10"),
        (0x1234, "v12.34"),
    ],
)
def test_version_string(version, expected):
    assert str(Version(version)) == expected


def test_to_json():
    assert Version(0x0662).to_json() == "0662"


def test_from_json():
    assert Version.from_json("0662") == 0x0662


def test_from_json_invalid():
    with pytest.raises(ValueError):
        Version.from_json("xyz")


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        Version.from_json(0x0662)


def test_encode_is_big_endian():
    assert Version(0x0892).encode() == b"\x08\x92"


@pytest.mark.parametrize("value", [0, 0x0662, 0x0892, 0xFFFF])
def test_round_trips(value):
    v = Version(value)
    assert Version.decode(v.encode()) == v
    assert Version.from_json(v.to_json()) == v


def test_decode_short_data():
    with pytest.raises(ValueError):
        Version.decode(b"\x08")


def test_out_of_range():
    with pytest.raises(ValueError):
        Version(0x10000)