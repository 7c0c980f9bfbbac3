import pytest


@pytest.mark.parametrize(
    "item, ipv4, ipv6, ip",
    [
        ("192.168.0.1", True, False, True),
        ("::1", False, True, True),
        ("2001:db8::8a2e:370:7334", False, True, True),
        ("::ffff:10.0.0.1", True, True, True),
        ("not-an-ip", False, False, False),
        ("256.0.0.1", False, False, False),
        ("fe80::1%eth0", False, False, False),
        ("", False, False, False),
    ],
)
def test_ip_rules(dispatcher, item: str, ipv4: bool, ipv6: bool, ip: bool) -> None:
    assert dispatcher.dispatch(item, "ipv4") is ipv4
    assert dispatcher.dispatch(item, "ipv6") is ipv6
    assert dispatcher.dispatch(item, "ip") is ip
