"""Access controller descriptions, as returned by device discovery."""

from __future__ import annotations

import datetime as _dt
import ipaddress
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .date import Date
from .mac import MacAddress
from .serial_number import SerialNumber
from .version import Version

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_WHITESPACE = re.compile(r"\s+")


def _ip(value: Optional[IPAddress]) -> str:
    return "<nil>" if value is None else str(value)


@dataclass
class Device:
    """An access controller: network configuration, firmware version and release date."""

    name: str = ""
    serial_number: SerialNumber = SerialNumber(0)
    ip_address: Optional[IPAddress] = None
    subnet_mask: Optional[IPAddress] = None
    gateway: Optional[IPAddress] = None
    mac_address: MacAddress = MacAddress()
    version: Version = Version(0)
    date: Date = Date()
    address: Optional[Tuple[IPAddress, int]] = None
    timezone: Optional[_dt.tzinfo] = None

    def __str__(self) -> str:
        s = (
            f"{SerialNumber(self.serial_number)} "
            f"{_ip(self.ip_address):<15} "
            f"{_ip(self.subnet_mask):<15} "
            f"{_ip(self.gateway):<15} "
            f"{str(self.mac_address):<17} "
            f"{Version(self.version)} "
            f"{self.date}"
        )
        if self.name != "":
            name = _WHITESPACE.sub(" ", self.name.strip())
            return f"{name}  {s}"
        return s