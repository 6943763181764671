import pytest

from igniteorm.connection import ConnectionConfig, parse_jdbc_url
from igniteorm.errors import ConnectionConfigurationError


def test_parse_jdbc_url_core_fields():
    parsed = parse_jdbc_url("jdbc:ignite:thin://localhost:10836/HR")
    assert parsed.prefix == "jdbc:ignite:thin"
    assert parsed.host == "localhost"
    assert parsed.port == 10836
    assert parsed.schema == "HR"
    assert parsed.query == {}


def test_parse_jdbc_url_applies_default_port():
    parsed = parse_jdbc_url("jdbc:ignite:thin://node1")
    assert parsed.port == 10800
    assert parsed.schema is None


def test_parse_jdbc_url_multiple_hosts():
    parsed = parse_jdbc_url("jdbc:ignite:thin://node1:10801,node2/PUBLIC")
    assert [str(address) for address in parsed.addresses] == ["node1:10801", "node2:10800"]


@pytest.mark.parametrize(
    "url",
    [
        "",
        "ignite://localhost",
        "jdbc:ignite:thin:localhost",
        "jdbc:ignite:thin:///PUBLIC",
        "jdbc:ignite:thin://localhost:port/PUBLIC",
        "jdbc:ignite:thin://localhost:70000",
    ],
)
def test_parse_jdbc_url_rejects_malformed(url):
    with pytest.raises(ConnectionConfigurationError):
        parse_jdbc_url(url)


def test_from_url_parses_credentials_and_flags():
    config = ConnectionConfig.from_url(
        "jdbc:ignite:thin://localhost/PUBLIC?"
        "user=ignite&password=secret&distributedJoins=true&lazy=0&queryMaxMemory=1024"
    )
    assert config.username == "ignite"
    assert config.password == "secret"
    assert config.flags == {"distributedJoins": True, "lazy": False}
    assert config.options == {"queryMaxMemory": "1024"}
    assert config.schema == "PUBLIC"


def test_from_url_redacts_password():
    config = ConnectionConfig.from_url("jdbc:ignite:thin://localhost/PUBLIC?user=ignite&password=secret")
    assert config.redacted_url() == "jdbc:ignite:thin://localhost:10800/PUBLIC?user=ignite&password=%2A%2A%2A"
    assert "secret" not in config.descriptive_label()


def test_from_url_options_override():
    config = ConnectionConfig.from_url(
        "jdbc:ignite:thin://localhost?queryMaxMemory=1024",
        options={"queryMaxMemory": 2048},
    )
    assert config.options["queryMaxMemory"] == 2048


def test_from_url_invalid_flag_raises():
    with pytest.raises(ConnectionConfigurationError):
        ConnectionConfig.from_url("jdbc:ignite:thin://localhost?lazy=maybe")


def test_from_url_rejects_other_dialects():
    with pytest.raises(ConnectionConfigurationError):
        ConnectionConfig.from_url("jdbc:postgresql://localhost:5432/db")


def test_from_env(monkeypatch):
    monkeypatch.setenv("IGNITE_URL", "jdbc:ignite:thin://cache-host:10900/HR")
    config = ConnectionConfig.from_env("IGNITE_URL")
    assert config.source == "IGNITE_URL"
    assert config.jdbc.port == 10900
    assert config.descriptive_label() == "IGNITE_URL (jdbc:ignite:thin://cache-host:10900/HR)"


def test_from_env_missing(monkeypatch):
    monkeypatch.delenv("IGNITE_URL", raising=False)
    with pytest.raises(ConnectionConfigurationError):
        ConnectionConfig.from_env("IGNITE_URL")


def test_parse_jdbc_url_port_range():
    parsed = parse_jdbc_url("jdbc:ignite:thin://node1:10800..10805,node2/PUBLIC")
    first, second = parsed.addresses
    assert first.port == 10800
    assert first.port_range_end == 10805
    assert list(first.ports) == [10800, 10801, 10802, 10803, 10804, 10805]
    assert list(second.ports) == [10800]
    assert str(first) == "node1:10800..10805"


def test_parse_jdbc_url_ipv6_hosts():
    parsed = parse_jdbc_url("jdbc:ignite:thin://[::1]:10801,[fe80::1]/HR")
    assert [(address.host, address.port) for address in parsed.addresses] == [("::1", 10801), ("fe80::1", 10800)]
    assert parsed.redacted() == "jdbc:ignite:thin://[::1]:10801,[fe80::1]:10800/HR"


@pytest.mark.parametrize(
    "url",
    [
        "jdbc:ignite:thin://node1:10805..10800",
        "jdbc:ignite:thin://node1:10800..",
        "jdbc:ignite:thin://[::1",
        "jdbc:ignite:thin://[::1]10800",
        "jdbc:ignite:thin://::1",
    ],
)
def test_parse_jdbc_url_rejects_bad_hosts(url):
    with pytest.raises(ConnectionConfigurationError):
        parse_jdbc_url(url)


def test_from_url_blank_flag_raises():
    with pytest.raises(ConnectionConfigurationError):
        ConnectionConfig.from_url("jdbc:ignite:thin://localhost?lazy=")


def test_parse_jdbc_url_keeps_blank_options():
    parsed = parse_jdbc_url("jdbc:ignite:thin://localhost?schema=&user=ignite")
    assert parsed.query == {"schema": "", "user": "ignite"}
