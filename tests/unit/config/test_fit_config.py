import json

import pytest

from statdist.config.fit_config import FitConfig, load_fit_config
from statdist.exceptions import ConfigValidationError


def test_defaults() -> None:
    cfg = FitConfig()
    assert cfg.to_dict() == {"initial_shape": 1.0, "max_iterations": 1000, "tolerance": 1e-16, "min_samples": 2}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_shape": 0.0},
        {"initial_shape": -1.0},
        {"max_iterations": 0},
        {"max_iterations": 2.5},
        {"tolerance": -1e-9},
        {"tolerance": "abc"},
        {"min_samples": 0},
    ],
)
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(ConfigValidationError):
        FitConfig(**kwargs)


def test_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ConfigValidationError, match="alpha0"):
        FitConfig.from_dict({"alpha0": 2.0})


def test_round_trip_through_dict() -> None:
    cfg = FitConfig(initial_shape=2.0, max_iterations=50, tolerance=1e-8, min_samples=10)
    assert FitConfig.from_dict(cfg.to_dict()) == cfg


def test_load_json(tmp_path) -> None:
    path = tmp_path / "fit.json"
    path.write_text(json.dumps({"initial_shape": 1.5, "max_iterations": 200}))
    cfg = load_fit_config(path)
    assert cfg.initial_shape == 1.5
    assert cfg.max_iterations == 200


def test_load_yaml_coerces_exponent_floats(tmp_path) -> None:
    path = tmp_path / "fit.yaml"
    path.write_text("tolerance: 1e-12\nmin_samples: 5\n")
    cfg = load_fit_config(path)
    assert cfg.tolerance == 1e-12
    assert cfg.min_samples == 5


def test_load_empty_yaml_uses_defaults(tmp_path) -> None:
    path = tmp_path / "fit.yml"
    path.write_text("")
    assert load_fit_config(path) == FitConfig()


@pytest.mark.parametrize(
    "name, content",
    [("fit.toml", "x = 1"), ("fit.json", "{not json"), ("fit.yaml", "- 1\n- 2\n")],
)
def test_load_rejects_bad_files(tmp_path, name, content) -> None:
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(ConfigValidationError):
        load_fit_config(path)


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigValidationError, match="not found"):
        load_fit_config(tmp_path / "missing.json")
