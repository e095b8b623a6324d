import pytest

from gbasedialect import GBASE_CAPABILITIES, AccessMode, ConnectionSettings, DialectConfigurationError


def test_from_env_reads_native_settings(monkeypatch):
    monkeypatch.setenv("GBASE_HOST", "db.internal")
    monkeypatch.setenv("GBASE_PORT", "5258")
    monkeypatch.setenv("GBASE_DATABASE", "warehouse")
    monkeypatch.setenv("GBASE_OPTIONS", "user=etl&password=secret")
    settings = ConnectionSettings.from_env()
    assert settings.access_mode is AccessMode.NATIVE
    assert settings.port == "5258"
    assert settings.options == {"user": "etl", "password": "secret"}
    assert settings.source == "GBASE"
    assert settings.url(GBASE_CAPABILITIES) == "jdbc:gbase://db.internal:5258/warehouse?user=etl&password=secret"
    assert settings.redacted_url(GBASE_CAPABILITIES) == "jdbc:gbase://db.internal:5258/warehouse?user=etl&password=***"
    assert settings.descriptive_label(GBASE_CAPABILITIES).startswith("GBASE (jdbc:gbase://")
    assert settings.driver_class() == "com.gbase.jdbc.Driver"


def test_from_env_odbc_and_overrides(monkeypatch):
    monkeypatch.setenv("DW_ACCESS_MODE", "ODBC")
    monkeypatch.setenv("DW_DATABASE", "dsn_name")
    settings = ConnectionSettings.from_env("DW", hostname="ignored")
    assert settings.access_mode is AccessMode.ODBC
    assert settings.hostname == "ignored"
    assert settings.url(GBASE_CAPABILITIES) == "jdbc:odbc:dsn_name"
    assert settings.driver_class() == "sun.jdbc.odbc.JdbcOdbcDriver"


def test_from_env_requires_database(monkeypatch):
    monkeypatch.delenv("MISSING_DATABASE", raising=False)
    with pytest.raises(DialectConfigurationError):
        ConnectionSettings.from_env("MISSING")


def test_from_env_rejects_bad_port_and_mode(monkeypatch):
    monkeypatch.setenv("BAD_DATABASE", "d")
    monkeypatch.setenv("BAD_PORT", "fifty")
    with pytest.raises(DialectConfigurationError):
        ConnectionSettings.from_env("BAD")

    monkeypatch.setenv("BAD_PORT", "1")
    monkeypatch.setenv("BAD_ACCESS_MODE", "carrier-pigeon")
    with pytest.raises(DialectConfigurationError):
        ConnectionSettings.from_env("BAD")


def test_label_without_source():
    settings = ConnectionSettings(database="d", hostname="h")
    assert settings.descriptive_label(GBASE_CAPABILITIES) == "jdbc:gbase://h/d"


def test_settings_are_hashable_values():
    first = ConnectionSettings(database="d", hostname="h", options={"a": "1"})
    second = ConnectionSettings(database="d", hostname="h", options={"a": "1"})
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first != ConnectionSettings(database="d", hostname="h", options={"a": "2"})
