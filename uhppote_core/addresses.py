"""Numeric IP address and port values for binding, broadcasting, controllers and listening."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

BIND_PORT = 0
BROADCAST_PORT = 60000
CONTROLLER_PORT = 60000

_WITH_PORT = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}:[0-9]{1,5}")
_WITHOUT_PORT = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")
_PORT = re.compile(r"[0-9]+")


def _parse_addr(s: str) -> IPAddress:
    try:
        return ipaddress.ip_address(s)
    except ValueError as err:
        raise ValueError(f"invalid IP address ({s}): {err}") from err


def _parse_addr_port(s: str) -> Tuple[IPAddress, int]:
    host, sep, port = s.rpartition(":")
    if not sep:
        raise ValueError(f"invalid address:port ({s}): missing port")
    try:
        if host.startswith("[") and host.endswith("]"):
            addr: IPAddress = ipaddress.IPv6Address(host[1:-1])
        else:
            addr = ipaddress.IPv4Address(host)
    except ValueError as err:
        raise ValueError(f"invalid address:port ({s}): {err}") from err
    if not _PORT.fullmatch(port) or int(port) > 0xFFFF:
        raise ValueError(f"invalid address:port ({s}): invalid port {port!r}")
    return addr, int(port)


def _format(addr: IPAddress, port: int) -> str:
    host = f"[{addr}]" if addr.version == 6 else str(addr)
    return f"{host}:{port}"


def _parse(
    s: str,
    *,
    default_port: Optional[int],
    invalid_ports: Tuple[int, ...],
    label: str,
    error: str,
) -> Tuple[IPAddress, int]:
    if not isinstance(s, str):
        raise TypeError(f"invalid address ({s!r})")
    if _WITH_PORT.search(s):
        addr, port = _parse_addr_port(s)
        if port in invalid_ports:
            raise ValueError(f"{_format(addr, port)}: invalid {label} port ({port})")
        return addr, port
    if default_port is not None and _WITHOUT_PORT.search(s):
        return _parse_addr(s), default_port
    raise ValueError(error)


def _json_string(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"invalid address ({value!r})")
    return value


@dataclass(frozen=True)
class _AddrPort:
    addr: Optional[IPAddress] = None
    port: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.addr, str):
            object.__setattr__(self, "addr", _parse_addr(self.addr))
        if not 0 <= int(self.port) <= 0xFFFF:
            raise ValueError(f"invalid port ({self.port})")
        object.__setattr__(self, "port", int(self.port))

    def _addr_port(self) -> str:
        assert self.addr is not None
        return _format(self.addr, self.port)

    def _str_with_default(self, default_port: int) -> str:
        if self.addr is None:
            return ""
        if self.port == default_port:
            return str(self.addr)
        return self._addr_port()


@dataclass(frozen=True)
class BindAddr(_AddrPort):
    """Local address to bind to; port 0 lets the system choose."""

    def is_valid(self) -> bool:
        return self.addr is not None

    def __str__(self) -> str:
        return self._str_with_default(BIND_PORT)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> BindAddr:
        return parse_bind_addr(_json_string(value))

    def equal(self, other: Optional[ControllerAddr]) -> bool:
        """True if other has the same IP address, ignoring the port."""
        return other is not None and self.addr == other.addr

    def clone(self) -> BindAddr:
        return replace(self)


@dataclass(frozen=True)
class BroadcastAddr(_AddrPort):
    """UDP broadcast address, defaulting to port 60000."""

    def is_valid(self) -> bool:
        return self.addr is not None

    def __str__(self) -> str:
        return self._str_with_default(BROADCAST_PORT)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> BroadcastAddr:
        return parse_broadcast_addr(_json_string(value))

    def equal(self, other: Optional[BroadcastAddr]) -> bool:
        """True if other has the same IP address, ignoring the port."""
        return other is not None and str(self.addr) == str(other.addr)

    def clone(self) -> BroadcastAddr:
        return replace(self)


@dataclass(frozen=True)
class ControllerAddr(_AddrPort):
    """Address of an access controller, defaulting to port 60000."""

    def is_valid(self) -> bool:
        return self.addr is not None and self.port != 0

    def __str__(self) -> str:
        if not self.is_valid():
            return ""
        return self._str_with_default(CONTROLLER_PORT)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> ControllerAddr:
        return parse_controller_addr(_json_string(value))

    def equal(self, other: ControllerAddr) -> bool:
        """True if other has the same IP address, ignoring the port."""
        return self.addr == other.addr

    def clone(self) -> ControllerAddr:
        return replace(self)


@dataclass(frozen=True)
class ListenAddr(_AddrPort):
    """UDP address to listen on for events; the port is required."""

    def is_valid(self) -> bool:
        return self.addr is not None and self.port != 0

    def __str__(self) -> str:
        if not self.is_valid():
            return ""
        return self._addr_port()

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> ListenAddr:
        return parse_listen_addr(_json_string(value))

    def equal(self, other: Optional[ListenAddr]) -> bool:
        """True if other has the same IP address, ignoring the port."""
        return other is not None and str(self.addr) == str(other.addr)

    def clone(self) -> ListenAddr:
        return replace(self)


def parse_bind_addr(s: str) -> BindAddr:
    """Parses a numeric address[:port], defaulting to port 0. Port 60000 is rejected."""
    addr, port = _parse(
        s,
        default_port=BIND_PORT,
        invalid_ports=(CONTROLLER_PORT,),
        label="'bind'",
        error=f"{s} is not a valid bind address:port",
    )
    return BindAddr(addr, port)


def parse_broadcast_addr(s: str) -> BroadcastAddr:
    """Parses a numeric address[:port], defaulting to port 60000. Port 0 is rejected."""
    addr, port = _parse(
        s,
        default_port=BROADCAST_PORT,
        invalid_ports=(0,),
        label="'broadcast'",
        error=f"{s} is not a valid UDP broadcast address:port",
    )
    return BroadcastAddr(addr, port)


def parse_controller_addr(s: str) -> ControllerAddr:
    """Parses a numeric address[:port], defaulting to port 60000. Port 0 is rejected."""
    addr, port = _parse(
        s,
        default_port=CONTROLLER_PORT,
        invalid_ports=(0,),
        label="'controller'",
        error=f"{s} is not a valid controller address:port",
    )
    return ControllerAddr(addr, port)


def parse_listen_addr(s: str) -> ListenAddr:
    """Parses a numeric address:port. Ports 0 and 60000 are rejected."""
    addr, port = _parse(
        s,
        default_port=None,
        invalid_ports=(0, CONTROLLER_PORT),
        label="UDP 'listen'",
        error=f"{s} is not a valid UDP listen address:port",
    )
    return ListenAddr(addr, port)