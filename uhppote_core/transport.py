"""UDP and TCP transport to access controllers: broadcast, directed send, TCP send and event listen."""

from __future__ import annotations

import contextlib
import ipaddress
import os
import socket
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union
from urllib.parse import unquote, urlsplit

from .addresses import BindAddr, BroadcastAddr, ControllerAddr, ListenAddr

Address = Union[Tuple[str, int], BindAddr, BroadcastAddr, ControllerAddr, ListenAddr]

SET_IP = 0x96
_ANY = ("0.0.0.0", 0)
_PREFIX = " ...          "
_POLL_INTERVAL = 0.1
_DEFAULT_SOCKS_PORT = 1080

_guard = threading.Lock()


def _sockaddr(addr: Address) -> Tuple[str, int]:
    if isinstance(addr, (BindAddr, BroadcastAddr, ControllerAddr, ListenAddr)):
        if addr.addr is None:
            raise ValueError(f"invalid address ({addr!r})")
        return str(addr.addr), addr.port
    host, port = addr
    return str(host), int(port)


def _dump(data: bytes, prefix: str) -> str:
    """Formats bytes as hex, sixteen to a line."""
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset : offset + 16]
        left = " ".join(f"{b:02x}" for b in chunk[:8])
        right = " ".join(f"{b:02x}" for b in chunk[8:])
        lines.append(f"{prefix}{offset:08x}  {left}  {right}".rstrip())
    return "\n".join(lines)


def _check(request: bytes) -> bytes:
    request = bytes(request)
    if len(request) < 2:
        raise ValueError(f"invalid request ({len(request)} bytes)")
    return request


def _set_socket_options(sock: socket.socket, tcp: bool = False) -> None:
    """Sets SO_REUSEADDR, plus SO_REUSEPORT on macOS and TCP_QUICKACK on Linux."""
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    if sys.platform == "darwin" and hasattr(socket, "SO_REUSEPORT"):
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
    if tcp and sys.platform.startswith("linux") and hasattr(socket, "TCP_QUICKACK"):
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_QUICKACK, 1)


def _locked(bind: Tuple[str, int]):
    """Serialises sockets bound to a fixed local port."""
    return _guard if bind[1] != 0 else contextlib.nullcontext()


def _recv_exact(sock: socket.socket, n: int) -> bytes:
    data = b""
    while len(data) < n:
        chunk = sock.recv(n - len(data))
        if not chunk:
            raise ConnectionError("connection closed by SOCKS5 proxy")
        data += chunk
    return data


@dataclass(frozen=True)
class _Proxy:
    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None


def _bypass(host: str, no_proxy: str) -> bool:
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        ip = None

    for entry in (e.strip() for e in no_proxy.split(",")):
        if not entry:
            continue
        if entry == "*":
            return True
        if "/" in entry:
            try:
                network = ipaddress.ip_network(entry, strict=False)
            except ValueError:
                continue
            if ip is not None and ip.version == network.version and ip in network:
                return True
            continue
        try:
            if ip is not None and ipaddress.ip_address(entry) == ip:
                return True
            continue
        except ValueError:
            pass
        zone = entry[1:] if entry.startswith("*.") else entry
        if zone.startswith("."):
            if host.endswith(zone) or host == zone[1:]:
                return True
        elif host == zone:
            return True
    return False


def _proxy_from_environment(host: str) -> Optional[_Proxy]:
    """The SOCKS5 proxy named by ALL_PROXY, unless NO_PROXY excludes host."""
    raw = os.environ.get("ALL_PROXY") or os.environ.get("all_proxy")
    if not raw:
        return None
    url = urlsplit(raw)
    if url.scheme not in ("socks5", "socks5h") or not url.hostname:
        return None
    try:
        port = url.port or _DEFAULT_SOCKS_PORT
    except ValueError:
        return None

    no_proxy = os.environ.get("NO_PROXY") or os.environ.get("no_proxy") or ""
    if no_proxy and _bypass(host, no_proxy):
        return None

    username = unquote(url.username) if url.username is not None else None
    password = unquote(url.password) if url.password is not None else None
    return _Proxy(url.hostname, port, username, password)


def _socks5_connect(sock: socket.socket, proxy: _Proxy, target: Tuple[str, int]) -> None:
    methods = b"\x00\x02" if proxy.username is not None else b"\x00"
    sock.sendall(bytes([5, len(methods)]) + methods)
    version, method = _recv_exact(sock, 2)
    if version != 5:
        raise ConnectionError(f"unexpected SOCKS version ({version})")

    if method == 2:
        user = (proxy.username or "").encode()
        secret = (proxy.password or "").encode()
        sock.sendall(bytes([1, len(user)]) + user + bytes([len(secret)]) + secret)
        _, status = _recv_exact(sock, 2)
        if status != 0:
            raise ConnectionError("SOCKS5 authentication failed")
    elif method != 0:
        raise ConnectionError("no acceptable SOCKS5 authentication methods")

    host, port = target
    try:
        address = b"\x01" + ipaddress.IPv4Address(host).packed
    except ValueError:
        encoded = host.encode()
        address = bytes([3, len(encoded)]) + encoded
    sock.sendall(b"\x05\x01\x00" + address + port.to_bytes(2, "big"))

    header = _recv_exact(sock, 4)
    if header[0] != 5:
        raise ConnectionError(f"unexpected SOCKS version ({header[0]})")
    if header[1] != 0:
        raise ConnectionError(f"SOCKS5 connect to {host}:{port} failed (code {header[1]})")
    atyp = header[3]
    if atyp == 1:
        _recv_exact(sock, 4)
    elif atyp == 4:
        _recv_exact(sock, 16)
    elif atyp == 3:
        _recv_exact(sock, _recv_exact(sock, 1)[0])
    else:
        raise ConnectionError(f"unknown SOCKS5 address type ({atyp})")
    _recv_exact(sock, 2)


@dataclass
class UT0311:
    """Sends requests to UT0311-L0x controllers and listens for their events."""

    bind_addr: Optional[Union[BindAddr, Tuple[str, int]]] = None
    listen_addr: Optional[Union[ListenAddr, Tuple[str, int]]] = None
    timeout: float = 5.0
    debug: bool = False

    def _bind(self) -> Tuple[str, int]:
        if self.bind_addr is None:
            return _ANY
        if isinstance(self.bind_addr, BindAddr) and not self.bind_addr.is_valid():
            return _ANY
        return _sockaddr(self.bind_addr)

    def _debug(self, msg: str, err: Optional[BaseException] = None) -> None:
        if self.debug:
            print(f"{msg}: {err}" if err is not None else msg)

    def broadcast(self, addr: Address, request: bytes) -> List[bytes]:
        """Sends request to addr and returns every reply received within the timeout."""
        request = _check(request)
        self._debug(f" ... request\n{_dump(request, _PREFIX)}\n")

        target = _sockaddr(addr)
        bind = self._bind()
        deadline = time.monotonic() + self.timeout

        with _locked(bind), socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            try:
                sock.bind(bind)
            except OSError as err:
                raise OSError(f"error creating UDP socket ({err})") from err

            sock.settimeout(1.0)
            try:
                n = sock.sendto(request, target)
            except OSError as err:
                raise OSError(f"failed to write to UDP socket [{err}]") from err
            self._debug(f" ... sent {n} bytes to {target[0]}:{target[1]} (UDP)\n")

            replies: List[bytes] = []

            # set-ip doesn't return a reply
            if request[1] == SET_IP:
                time.sleep(max(0.0, deadline - time.monotonic()))
                return replies

            while (remaining := deadline - time.monotonic()) > 0:
                sock.settimeout(remaining)
                try:
                    reply, remote = sock.recvfrom(2048)
                except TimeoutError:
                    break
                replies.append(reply)
                self._debug(
                    f" ... received {len(reply)} bytes from {remote[0]}:{remote[1]} (UDP)\n"
                    f"{_dump(reply, _PREFIX)}"
                )

            return replies

    def broadcast_to(
        self, addr: Address, request: bytes, callback: Callable[[bytes], bool]
    ) -> Optional[bytes]:
        """Sends request to addr and returns the first reply that callback accepts."""
        request = _check(request)
        self._debug(f" ... request\n{_dump(request, _PREFIX)}\n")

        target = _sockaddr(addr)
        bind = self._bind()
        deadline = time.monotonic() + self.timeout

        with _locked(bind), socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            try:
                sock.bind(bind)
            except OSError as err:
                raise OSError(f"error creating UDP socket ({err})") from err

            sock.settimeout(max(self.timeout, 0.001))
            try:
                n = sock.sendto(request, target)
            except OSError as err:
                raise OSError(f"failed to write to UDP socket [{err}]") from err
            self._debug(f" ... sent {n} bytes to {target[0]}:{target[1]} (UDP)\n")

            # set-ip doesn't return a reply
            if request[1] == SET_IP:
                return None

            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("timeout waiting for reply")
                sock.settimeout(remaining)
                reply, remote = sock.recvfrom(2048)
                if callback(reply):
                    self._debug(
                        f" ... received {len(reply)} bytes from {remote[0]}:{remote[1]} (UDP)\n"
                        f"{_dump(reply, _PREFIX)}"
                    )
                    return reply

    def send_udp(self, addr: Address, request: bytes) -> Optional[bytes]:
        """Sends request over a connected UDP socket and returns the reply, if any."""
        request = _check(request)
        target = _sockaddr(addr)
        bind = self._bind()

        with _locked(bind), socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            _set_socket_options(sock)
            sock.bind(bind)
            sock.settimeout(max(self.timeout, 0.001))
            sock.connect(target)

            try:
                n = sock.send(request)
            except OSError as err:
                raise OSError(f"failed to write to UDP socket [{err}]") from err
            self._debug(f" ... sent {n} bytes to {target[0]}:{target[1]} (UDP)")
            self._debug(f" ... request\n{_dump(request, _PREFIX)}\n")

            # set-ip doesn't return a reply
            if request[1] == SET_IP:
                return None

            try:
                reply = sock.recv(1024)
            except OSError as err:
                self._debug(" ... receive error", err)
                raise
            self._debug(
                f" ... received {len(reply)} bytes from {target[0]}:{target[1]} (UDP)\n"
                f" ... response\n{_dump(reply, _PREFIX)}"
            )
            return reply

    def send_tcp(self, addr: Address, request: bytes) -> Optional[bytes]:
        """Sends request over TCP, through an ALL_PROXY SOCKS5 proxy if one is set."""
        request = _check(request)
        target = _sockaddr(addr)
        bind = self._bind()
        deadline = time.monotonic() + self.timeout
        proxy = _proxy_from_environment(target[0])

        with _locked(bind), socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            _set_socket_options(sock, tcp=True)
            sock.bind(bind)
            sock.settimeout(max(deadline - time.monotonic(), 0.001))

            if proxy is None:
                sock.connect(target)
            else:
                sock.connect((proxy.host, proxy.port))
                _socks5_connect(sock, proxy, target)

            remote = sock.getpeername()
            sock.settimeout(max(deadline - time.monotonic(), 0.001))

            try:
                sock.sendall(request)
            except OSError as err:
                raise OSError(f"failed to write to TCP socket [{err}]") from err
            self._debug(f" ... sent {len(request)} bytes to {remote[0]}:{remote[1]} (TCP)")
            self._debug(f" ... request\n{_dump(request, _PREFIX)}\n")

            # set-ip doesn't return a reply
            if request[1] == SET_IP:
                return None

            try:
                reply = sock.recv(1024)
            except OSError as err:
                self._debug(" ... receive error", err)
                raise
            if not reply:
                self._debug(" ... receive error", EOFError("EOF"))
                raise ConnectionError("connection closed before reply")
            self._debug(
                f" ... received {len(reply)} bytes from {remote[0]}:{remote[1]} (TCP)\n"
                f" ... response\n{_dump(reply, _PREFIX)}"
            )
            return reply

    def listen(self, stop: threading.Event, callback: Callable[[bytes], None]) -> threading.Thread:
        """Passes each datagram received on the listen address to callback until stop is set.

        Returns the listening thread, which ends once stop is set and the socket is closed.
        """
        if self.listen_addr is None:
            raise ValueError("Listen requires a non-zero UDP port")
        address = _sockaddr(self.listen_addr)
        if address[1] == 0:
            raise ValueError("Listen requires a non-zero UDP port")

        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(address)
        except OSError as err:
            sock.close()
            raise OSError(f"error opening UDP listen socket ({err})") from err
        sock.settimeout(_POLL_INTERVAL)

        thread = threading.Thread(
            target=self._listen, args=(sock, stop, callback), name="ut0311-listen", daemon=True
        )
        thread.start()
        return thread

    def _listen(
        self, sock: socket.socket, stop: threading.Event, callback: Callable[[bytes], None]
    ) -> None:
        with sock:
            self._debug(" ... listening")
            while not stop.is_set():
                try:
                    message, remote = sock.recvfrom(2048)
                except TimeoutError:
                    continue
                except OSError as err:
                    if stop.is_set():
                        break
                    self._debug("Error reading from UDP socket", err)
                    continue

                self._debug(
                    f" ... received {len(message)} bytes from {remote[0]}:{remote[1]} (UDP)\n"
                    f" ... response\n{_dump(message, _PREFIX)}\n"
                )
                callback(message)
        self._debug(" ... listen socket closed")


@contextlib.contextmanager
def _closing_all(*socks: socket.socket) -> Iterator[None]:
    try:
        yield
    finally:
        for s in socks:
            s.close()