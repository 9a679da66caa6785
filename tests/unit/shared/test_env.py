from __future__ import annotations

import logging
import os

import pytest

from power_terminal.shared.env import load_secret_file_variables


def _unset(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.delenv(key, raising=False)


def test_token_file_is_exposed_as_token(tmp_path, monkeypatch):
    token_file = tmp_path / "ha_token"
    token_file.write_text("long-lived-token\n", encoding="utf-8")

    monkeypatch.setenv("HA_TOKEN_FILE", str(token_file))
    _unset(monkeypatch, "HA_TOKEN")

    load_secret_file_variables()

    assert os.environ["HA_TOKEN"] == "long-lived-token"


def test_missing_secret_file_is_logged(monkeypatch, tmp_path, caplog):
    monkeypatch.setenv("MISSING_SECRET_FILE", str(tmp_path / "absent"))
    _unset(monkeypatch, "MISSING_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(record.message == "env.secret_file.missing" for record in caplog.records)
    assert "MISSING_SECRET" not in os.environ


def test_undecodable_secret_file_is_logged(tmp_path, monkeypatch, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")

    monkeypatch.setenv("BINARY_SECRET_FILE", str(binary_file))
    _unset(monkeypatch, "BINARY_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.decode_failed" for record in caplog.records
    )


def test_unreadable_secret_file_is_logged(monkeypatch, caplog):
    def _raise_os_error(self, *args, **kwargs):
        raise PermissionError("permission denied")

    monkeypatch.setenv("BROKEN_SECRET_FILE", "/run/secrets/broken")
    _unset(monkeypatch, "BROKEN_SECRET")
    monkeypatch.setattr(
        "power_terminal.shared.env.Path.read_text", _raise_os_error, raising=False
    )

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_existing_variable_wins_over_file(monkeypatch):
    monkeypatch.setenv("HA_TOKEN", "from-env")
    monkeypatch.setenv("HA_TOKEN_FILE", "/run/secrets/ignored")

    load_secret_file_variables()

    assert os.environ["HA_TOKEN"] == "from-env"


def test_empty_file_path_is_skipped(monkeypatch):
    _unset(monkeypatch, "EMPTY_SECRET")
    monkeypatch.setenv("EMPTY_SECRET_FILE", "")

    load_secret_file_variables()

    assert "EMPTY_SECRET" not in os.environ
