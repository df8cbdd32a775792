import pytest

from slstatus.network import NetSpeed, _parse_if_inet6, ipv4, ipv6


def _write_counter(root, interface, direction, value):
    stats = root / interface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


def test_first_measurement_is_unknown(tmp_path):
    _write_counter(tmp_path, "eth0", "rx", 5000)
    meter = NetSpeed("rx", 1000, tmp_path)
    assert meter.measure("eth0") is None


def test_rate_between_readings(tmp_path):
    _write_counter(tmp_path, "eth0", "rx", 1000)
    meter = NetSpeed("rx", 1000, tmp_path)
    assert meter.measure("eth0") is None
    _write_counter(tmp_path, "eth0", "rx", 1000 + 2048)
    assert meter.measure("eth0") == "2.0 Ki"


def test_tx_reads_tx_counter(tmp_path):
    _write_counter(tmp_path, "eth0", "tx", 100)
    _write_counter(tmp_path, "eth0", "rx", 999999)
    meter = NetSpeed("tx", 1000, tmp_path)
    meter.measure("eth0")
    _write_counter(tmp_path, "eth0", "tx", 100)
    assert meter.measure("eth0") == "0.0 "


def test_zero_counter_stays_unknown(tmp_path):
    _write_counter(tmp_path, "eth0", "rx", 0)
    meter = NetSpeed("rx", 1000, tmp_path)
    assert meter.measure("eth0") is None
    assert meter.measure("eth0") is None


def test_missing_interface(tmp_path):
    meter = NetSpeed("rx", 1000, tmp_path)
    assert meter.measure("nope0") is None


def test_invalid_direction():
    with pytest.raises(ValueError):
        NetSpeed("up")


def test_invalid_interval():
    with pytest.raises(ValueError):
        NetSpeed("rx", 0)


def test_parse_if_inet6_loopback():
    text = "00000000000000000000000000000001 01 80 10 80       lo\n"
    assert _parse_if_inet6(text, "lo") == "::1"


def test_parse_if_inet6_link_local_has_scope():
    text = (
        "00000000000000000000000000000001 01 80 10 80       lo\n"
        "fe800000000000000000000000000001 02 40 20 80     eth0\n"
    )
    assert _parse_if_inet6(text, "eth0") == "fe80::1%eth0"


def test_parse_if_inet6_unknown_interface():
    text = "00000000000000000000000000000001 01 80 10 80       lo\n"
    assert _parse_if_inet6(text, "eth0") is None


def test_ipv4_loopback():
    assert ipv4("lo") == "127.0.0.1"


def test_ipv4_unknown_interface():
    assert ipv4("nosuchif0") is None


def test_ipv6_unknown_interface():
    assert ipv6("nosuchif0") is None