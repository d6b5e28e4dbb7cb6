import json

import pytest

from wordcount.config import CONFIG_PATH_ENV, CORPUS_ENV, HarnessSettings, load_settings
from wordcount.exceptions import ConfigurationError
from wordcount.strategies import STRATEGY_NAMES


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(CORPUS_ENV, raising=False)


def test_defaults_cover_full_sweep():
    settings = load_settings()

    assert settings.corpus_path is None
    assert settings.load_levels == list(range(1, 10))
    assert settings.strategies == list(STRATEGY_NAMES)
    assert settings.warmup_iterations == 20
    assert settings.measurement_iterations == 20


def test_yaml_file_is_loaded(tmp_path):
    path = tmp_path / "bench.yaml"
    path.write_text(
        "corpus_path: words.txt\n"
        "load_levels: [9, 1, 9]\n"
        "strategies: [compiled, hashMap]\n"
        "warmup_iterations: 1\n",
        encoding="utf-8",
    )

    settings = load_settings(str(path))

    assert settings.corpus_path == "words.txt"
    assert settings.load_levels == [1, 9]
    assert settings.strategies == ["hashMap", "compiled"]
    assert settings.warmup_iterations == 1


def test_json_file_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "bench.json"
    path.write_text(json.dumps({"measurement_iterations": 3}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert load_settings().measurement_iterations == 3


def test_precedence_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "bench.yml"
    path.write_text("corpus_path: from-file.txt\nload_levels: [2]\n", encoding="utf-8")
    monkeypatch.setenv(CORPUS_ENV, "from-env.txt")

    settings = load_settings(str(path), load_levels=[3], strategies=None)

    assert settings.corpus_path == "from-env.txt"
    assert settings.load_levels == [3]
    assert settings.strategies == list(STRATEGY_NAMES)

    assert load_settings(str(path), corpus_path="cli.txt").corpus_path == "cli.txt"


def test_empty_file_means_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(str(path)) == HarnessSettings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"load_levels": [0]},
        {"load_levels": [10]},
        {"load_levels": []},
        {"strategies": ["trove"]},
        {"strategies": []},
        {"measurement_iterations": 0},
        {"warmup_iterations": -1},
        {"fork_count": 3},
    ],
)
def test_invalid_values_raise_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        load_settings(**overrides)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(str(tmp_path / "nope.yaml"))

    assert excinfo.value.error_code == "CONFIGURATION_ERROR"


def test_unsupported_and_malformed_files(tmp_path):
    toml = tmp_path / "bench.toml"
    toml.write_text("x = 1", encoding="utf-8")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")

    for path in (toml, broken, listing):
        with pytest.raises(ConfigurationError):
            load_settings(str(path))
