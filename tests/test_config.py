import json
import logging
from pathlib import Path

import pytest

from planar2d import EPS
from planar2d.config import (
    AppConfig,
    DisplayParams,
    ToleranceParams,
    config_path,
    load_config,
    save_config,
)


def test_defaults() -> None:
    cfg = AppConfig()
    assert cfg.tolerance.eps == EPS
    assert cfg.display.degrees is True
    assert cfg.display.precision == 6


def test_json_round_trip() -> None:
    cfg = AppConfig(
        tolerance=ToleranceParams(eps=1e-6),
        display=DisplayParams(degrees=False, precision=3),
    )
    assert AppConfig.from_json(cfg.to_json()) == cfg


def test_from_json_fills_missing_values() -> None:
    cfg = AppConfig.from_json(json.dumps({"display": {"precision": 2}}))
    assert cfg.display.precision == 2
    assert cfg.display.degrees is True
    assert cfg.tolerance.eps == EPS


def test_from_json_rejects_negative_tolerance() -> None:
    with pytest.raises(ValueError):
        AppConfig.from_json(json.dumps({"tolerance": {"eps": -1.0}}))


def test_config_path_honours_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("PLANAR2D_CONFIG", str(target))
    assert config_path() == target
    monkeypatch.delenv("PLANAR2D_CONFIG")
    assert config_path() == Path.home() / ".planar2d_config.json"


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    cfg = AppConfig(display=DisplayParams(degrees=False, precision=4))
    assert save_config(cfg, path) == path
    assert load_config(path) == cfg


def test_load_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.json") == AppConfig()


@pytest.mark.parametrize(
    "text",
    (
        "{not json",
        "[1, 2]",
        '{"tolerance": {"eps": -2}}',
        '{"display": {"precision": -1}}',
        '{"display": {"precision": 2.5}}',
        '{"display": {"degrees": "false"}}',
    ),
)
def test_load_broken_file_warns_and_gives_defaults(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
    text: str,
) -> None:
    path = tmp_path / "broken.json"
    path.write_text(text, encoding="utf-8")
    monkeypatch.setattr(logging.getLogger("planar2d"), "propagate", True)
    with caplog.at_level(logging.WARNING, logger="planar2d.config"):
        cfg = load_config(path)
    assert cfg == AppConfig()
    assert any("Ignoring unreadable config" in r.getMessage() for r in caplog.records)


def test_from_json_rejects_non_boolean_degrees() -> None:
    with pytest.raises(TypeError):
        AppConfig.from_json(json.dumps({"display": {"degrees": "false"}}))
    with pytest.raises(TypeError):
        AppConfig.from_json(json.dumps({"display": {"degrees": 0}}))


def test_from_json_rejects_bad_precision() -> None:
    with pytest.raises(ValueError):
        AppConfig.from_json(json.dumps({"display": {"precision": -1}}))
    with pytest.raises(TypeError):
        AppConfig.from_json(json.dumps({"display": {"precision": True}}))
