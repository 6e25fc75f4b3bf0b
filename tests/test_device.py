import ipaddress

from uhppote_core.date import parse_date
from uhppote_core.device import Device
from uhppote_core.mac import parse_mac
from uhppote_core.serial_number import SerialNumber
from uhppote_core.version import Version


def _device(name=""):
    return Device(
        name=name,
        serial_number=SerialNumber(123456789),
        ip_address=ipaddress.IPv4Address("10.0.0.100"),
        subnet_mask=ipaddress.IPv4Address("255.255.255.0"),
        gateway=ipaddress.IPv4Address("10.0.0.1"),
        mac_address=parse_mac("00:00:5e:00:53:01"),
        version=Version(0x0892),
        date=parse_date("2020-12-05"),
    )


def test_device_string():
    expected = (
        "Alpha  123456789  10.0.0.100      255.255.255.0   10.0.0.1        "
        "00:00:5e:00:53:01 v8.92 2020-12-05"
    )
    assert str(_device("Alpha")) == expected


def test_device_string_without_name():
    expected = (
        "123456789  10.0.0.100      255.255.255.0   10.0.0.1        "
        "00:00:5e:00:53:01 v8.92 2020-12-05"
    )
    assert str(_device()) == expected


def test_device_string_with_padded_name():
    expected = (
        "Al Pha  123456789  10.0.0.100      255.255.255.0   10.0.0.1        "
        "00:00:5e:00:53:01 v8.92 2020-12-05"
    )
    assert str(_device("    Al   Pha  ")) == expected


def test_device_string_with_missing_addresses():
    s = str(Device(serial_number=SerialNumber(123456789)))
    assert s.startswith("123456789  <nil>")
    assert s.count("<nil>") == 3