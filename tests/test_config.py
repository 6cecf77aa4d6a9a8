from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLAN_IMPORT_JSON_INDENT", "4")
    monkeypatch.setenv("PLAN_IMPORT_SHOW_BANNER", "false")

    settings = AppSettings()

    assert settings.json_indent == 4
    assert settings.show_banner is False
    assert settings.output_dir == Path("exports")


def test_settings_reject_out_of_range_indent(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLAN_IMPORT_JSON_INDENT", "20")
    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "plan-import"
