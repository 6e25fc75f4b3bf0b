import ipaddress

import pytest

from uhppote_core.addresses import (
    BindAddr,
    BroadcastAddr,
    ControllerAddr,
    ListenAddr,
    parse_bind_addr,
    parse_broadcast_addr,
    parse_controller_addr,
    parse_listen_addr,
)

IP = ipaddress.IPv4Address("192.168.1.100")


# ---- bind ----

@pytest.mark.parametrize("port,expected", [(0, "192.168.1.100"), (1, "192.168.1.100:1"), (60000, "192.168.1.100:60000")])
def test_bind_addr_string(port, expected):
    assert str(BindAddr(IP, port)) == expected


def test_bind_addr_string_with_invalid_value():
    assert str(BindAddr()) == ""


@pytest.mark.parametrize(
    "s,port",
    [("192.168.1.100", 0), ("192.168.1.100:0", 0), ("192.168.1.100:10001", 10001), ("192.168.1.100:60001", 60001)],
)
def test_parse_bind_addr(s, port):
    addr = parse_bind_addr(s)
    assert addr.is_valid()
    assert addr == BindAddr(IP, port)


def test_parse_bind_addr_with_invalid_port():
    with pytest.raises(ValueError):
        parse_bind_addr("192.168.1.100:60000")


def test_parse_bind_addr_with_garbage():
    with pytest.raises(ValueError):
        parse_bind_addr("localhost")


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:0"),
        ("192.168.1.100:0", "192.168.1.100:0"),
        ("192.168.1.100:1", "192.168.1.100:1"),
        ("192.168.1.100:60001", "192.168.1.100:60001"),
    ],
)
def test_bind_addr_set(s, expected):
    assert parse_bind_addr(s) == parse_bind_addr(expected)


@pytest.mark.parametrize("port,expected", [(0, "192.168.1.100"), (1, "192.168.1.100:1"), (60000, "192.168.1.100:60000")])
def test_bind_addr_to_json(port, expected):
    assert BindAddr(IP, port).to_json() == expected


def test_bind_addr_to_json_with_invalid_value():
    assert BindAddr().to_json() == ""


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:0"),
        ("192.168.1.100:12345", "192.168.1.100:12345"),
        ("192.168.1.100:0", "192.168.1.100:0"),
    ],
)
def test_bind_addr_from_json(s, expected):
    assert BindAddr.from_json(s) == parse_bind_addr(expected)


def test_bind_addr_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        BindAddr.from_json(12345)


@pytest.mark.parametrize(
    "bind,controller,expected",
    [
        ("192.168.1.100:0", "192.168.1.100:60000", True),
        ("192.168.1.100:12345", "192.168.1.100:12345", True),
        ("192.168.1.100:0", "192.168.1.125:60000", False),
    ],
)
def test_bind_addr_equal(bind, controller, expected):
    assert parse_bind_addr(bind).equal(parse_controller_addr(controller)) is expected


def test_bind_addr_equal_none():
    assert parse_bind_addr("192.168.1.100").equal(None) is False


def test_bind_addr_clone():
    bind = parse_bind_addr("192.168.1.100:12345")
    expected = parse_bind_addr("192.168.1.100:12345")
    clone = bind.clone()
    bind = parse_bind_addr("192.168.1.100:54321")
    assert clone == expected
    assert bind != expected


def test_bind_addr_addr_and_port():
    bind = parse_bind_addr("192.168.1.100:12345")
    assert bind.addr == IP
    assert bind.port == 12345


# ---- broadcast ----

@pytest.mark.parametrize(
    "s,port",
    [("192.168.1.100", 60000), ("192.168.1.100:60000", 60000), ("192.168.1.100:10001", 10001), ("192.168.1.100:60001", 60001)],
)
def test_parse_broadcast_addr(s, port):
    addr = parse_broadcast_addr(s)
    assert addr.is_valid()
    assert addr == BroadcastAddr(IP, port)


def test_invalid_broadcast_addr():
    with pytest.raises(ValueError):
        parse_broadcast_addr("192.168.1.100:0")


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:60000"),
        ("192.168.1.100:12345", "192.168.1.100:12345"),
        ("192.168.1.100:60000", "192.168.1.100:60000"),
    ],
)
def test_broadcast_addr_set(s, expected):
    assert parse_broadcast_addr(s) == parse_broadcast_addr(expected)


@pytest.mark.parametrize("port,expected", [(0, "192.168.1.100:0"), (1, "192.168.1.100:1"), (60000, "192.168.1.100")])
def test_broadcast_addr_string_and_json(port, expected):
    broadcast = BroadcastAddr(IP, port)
    assert str(broadcast) == expected
    assert broadcast.to_json() == expected


def test_broadcast_addr_with_invalid_value():
    assert str(BroadcastAddr()) == ""
    assert BroadcastAddr().to_json() == ""


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:60000"),
        ("192.168.1.100:12345", "192.168.1.100:12345"),
        ("192.168.1.100:60000", "192.168.1.100:60000"),
    ],
)
def test_broadcast_addr_from_json(s, expected):
    assert BroadcastAddr.from_json(s) == parse_broadcast_addr(expected)


@pytest.mark.parametrize(
    "p,q,expected",
    [
        ("192.168.1.100:60000", "192.168.1.100:60000", True),
        ("192.168.1.100:60000", "192.168.1.100:12345", True),
        ("192.168.1.100:60000", "192.168.1.125:60000", False),
    ],
)
def test_broadcast_addr_equal(p, q, expected):
    assert parse_broadcast_addr(p).equal(parse_broadcast_addr(q)) is expected


def test_broadcast_addr_clone():
    broadcast = parse_broadcast_addr("192.168.1.100:12345")
    expected = parse_broadcast_addr("192.168.1.100:12345")
    clone = broadcast.clone()
    broadcast = parse_broadcast_addr("192.168.1.100:54321")
    assert clone == expected
    assert broadcast != expected


def test_broadcast_addr_addr_and_port():
    broadcast = parse_broadcast_addr("192.168.1.100:12345")
    assert broadcast.addr == IP
    assert broadcast.port == 12345


# ---- controller ----

@pytest.mark.parametrize(
    "s,port",
    [("192.168.1.100", 60000), ("192.168.1.100:60000", 60000), ("192.168.1.100:10001", 10001), ("192.168.1.100:60001", 60001)],
)
def test_parse_controller_addr(s, port):
    addr = parse_controller_addr(s)
    assert addr.is_valid()
    assert addr == ControllerAddr(IP, port)


def test_parse_controller_addr_with_invalid_port():
    with pytest.raises(ValueError):
        parse_controller_addr("192.168.1.100:0")


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:60000"),
        ("192.168.1.100:60000", "192.168.1.100:60000"),
        ("192.168.1.100:1", "192.168.1.100:1"),
        ("192.168.1.100:60001", "192.168.1.100:60001"),
    ],
)
def test_controller_addr_set(s, expected):
    assert parse_controller_addr(s) == parse_controller_addr(expected)


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100"),
        ("192.168.1.100:60000", "192.168.1.100"),
        ("192.168.1.100:12345", "192.168.1.100:12345"),
    ],
)
def test_controller_addr_string(s, expected):
    assert str(parse_controller_addr(s)) == expected


def test_controller_addr_string_with_invalid_value():
    assert str(ControllerAddr()) == ""
    assert ControllerAddr().to_json() == ""


@pytest.mark.parametrize("port,expected", [(1, "192.168.1.100:1"), (60000, "192.168.1.100")])
def test_controller_addr_to_json(port, expected):
    assert ControllerAddr(IP, port).to_json() == expected


@pytest.mark.parametrize(
    "s,expected",
    [
        ("192.168.1.100", "192.168.1.100:60000"),
        ("192.168.1.100:12345", "192.168.1.100:12345"),
        ("192.168.1.100:60000", "192.168.1.100:60000"),
    ],
)
def test_controller_addr_from_json(s, expected):
    assert ControllerAddr.from_json(s) == parse_controller_addr(expected)


@pytest.mark.parametrize(
    "p,q,expected",
    [
        ("192.168.1.100:60000", "192.168.1.100:60000", True),
        ("192.168.1.100:12345", "192.168.1.100:12345", True),
        ("192.168.1.100:60000", "192.168.1.125:60000", False),
    ],
)
def test_controller_addr_equal(p, q, expected):
    assert parse_controller_addr(p).equal(parse_controller_addr(q)) is expected


def test_controller_addr_clone():
    controller = parse_controller_addr("192.168.1.100:12345")
    expected = parse_controller_addr("192.168.1.100:12345")
    clone = controller.clone()
    controller = parse_controller_addr("192.168.1.100:54321")
    assert clone == expected
    assert controller != expected


def test_controller_addr_addr_and_port():
    controller = parse_controller_addr("192.168.1.100:12345")
    assert controller.addr == IP
    assert controller.port == 12345


@pytest.mark.parametrize(
    "address,expected",
    [(ControllerAddr(IP, 60000), True), (ControllerAddr(IP, 0), False), (ControllerAddr(), False)],
)
def test_controller_addr_is_valid(address, expected):
    assert address.is_valid() is expected


def test_bind_and_controller_addr_are_distinct_types():
    assert parse_bind_addr("192.168.1.100:12345") != parse_controller_addr("192.168.1.100:12345")


# ---- listen ----

@pytest.mark.parametrize("s,port", [("192.168.1.100:1", 1), ("192.168.1.100:60001", 60001)])
def test_parse_listen_addr(s, port):
    addr = parse_listen_addr(s)
    assert addr.is_valid()
    assert addr == ListenAddr(IP, port)


@pytest.mark.parametrize("s", ["192.168.1.100:0", "192.168.1.100:60000", "192.168.1.100"])
def test_parse_listen_addr_with_invalid_port(s):
    with pytest.raises(ValueError):
        parse_listen_addr(s)


@pytest.mark.parametrize("port,expected", [(1, "192.168.1.100:1"), (60001, "192.168.1.100:60001")])
def test_listen_addr_string(port, expected):
    assert str(ListenAddr(IP, port)) == expected


def test_listen_addr_string_with_invalid_value():
    assert str(ListenAddr()) == ""


@pytest.mark.parametrize("port,expected", [(0, ""), (1, "192.168.1.100:1"), (60001, "192.168.1.100:60001")])
def test_listen_addr_to_json(port, expected):
    assert ListenAddr(IP, port).to_json() == expected


def test_listen_addr_to_json_with_invalid_value():
    assert ListenAddr().to_json() == ""


@pytest.mark.parametrize("s", ["192.168.1.100:60001", "192.168.1.100:12345"])
def test_listen_addr_from_json(s):
    assert ListenAddr.from_json(s) == parse_listen_addr(s)


@pytest.mark.parametrize(
    "address,expected",
    [(parse_listen_addr("192.168.1.100:60001"), True), (ListenAddr(IP, 0), False), (ListenAddr(), False)],
)
def test_listen_addr_is_valid(address, expected):
    assert address.is_valid() is expected


def test_listen_addr_equal_and_clone():
    listen = parse_listen_addr("192.168.1.100:60001")
    assert listen.equal(parse_listen_addr("192.168.1.100:12345")) is True
    assert listen.equal(parse_listen_addr("192.168.1.125:60001")) is False
    assert listen.equal(None) is False
    assert listen.clone() == listen