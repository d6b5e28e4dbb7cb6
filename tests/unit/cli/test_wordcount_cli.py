from __future__ import annotations

import json
from collections import Counter

import pytest
from typer.testing import CliRunner

from wordcount import __version__
from wordcount import cli
from wordcount.cli import app
from wordcount.config import CONFIG_PATH_ENV, CORPUS_ENV
from wordcount.driver import CountMismatch
from wordcount.strategies import STRATEGY_NAMES


runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(CORPUS_ENV, raising=False)


def _tsv_lines(output: str):
    return [line for line in output.splitlines() if line.count("\t") == 2]


def test_memory_prints_one_line_per_pair(corpus_file):
    result = runner.invoke(app, ["memory", "--corpus", str(corpus_file), "--level", "1", "--level", "9"])

    assert result.exit_code == 0, result.output
    lines = _tsv_lines(result.stdout)
    assert len(lines) == 2 * len(STRATEGY_NAMES)

    keys = [(name, int(level)) for name, level, _ in (line.split("\t") for line in lines)]
    assert keys == sorted(keys)
    assert all(int(line.split("\t")[2]) >= 0 for line in lines)


def test_memory_with_strategy_filter(corpus_file):
    result = runner.invoke(
        app, ["memory", "--corpus", str(corpus_file), "-l", "5", "-s", "compiled", "-s", "stringKhash"]
    )

    assert result.exit_code == 0, result.output
    names = [line.split("\t")[0] for line in _tsv_lines(result.stdout)]
    assert names == ["compiled", "stringKhash"]


def test_memory_reads_corpus_from_environment(corpus_file, monkeypatch):
    monkeypatch.setenv(CORPUS_ENV, str(corpus_file))

    result = runner.invoke(app, ["memory", "-l", "3", "-s", "hashMap"])

    assert result.exit_code == 0, result.output
    assert _tsv_lines(result.stdout)[0].startswith("hashMap\t3\t")


def test_memory_pretty_renders_table(corpus_file):
    result = runner.invoke(app, ["memory", "--corpus", str(corpus_file), "-l", "2", "--pretty"])

    assert result.exit_code == 0, result.output
    assert "Retained bytes" in result.stdout
    assert _tsv_lines(result.stdout) == []


def test_missing_corpus_exits_with_error(tmp_path):
    result = runner.invoke(app, ["memory", "--corpus", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1


def test_no_corpus_configured_exits_with_error():
    result = runner.invoke(app, ["memory"])

    assert result.exit_code == 1


def test_invalid_level_exits_with_error(corpus_file):
    result = runner.invoke(app, ["memory", "--corpus", str(corpus_file), "--level", "12"])

    assert result.exit_code == 1


def test_config_file_option(corpus_file, tmp_path):
    config = tmp_path / "bench.yaml"
    config.write_text(f"corpus_path: {corpus_file}\nload_levels: [4]\nstrategies: [mutableInt]\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "memory"])

    assert result.exit_code == 0, result.output
    assert [line.split("\t")[:2] for line in _tsv_lines(result.stdout)] == [["mutableInt", "4"]]


def test_time_saves_results(corpus_file, tmp_path):
    out = tmp_path / "timing"

    result = runner.invoke(
        app,
        ["time", "--corpus", str(corpus_file), "-l", "5", "-s", "hashMap",
         "--warmup", "0", "--iterations", "2", "--output-dir", str(out)],
    )

    assert result.exit_code == 0, result.output
    files = list(out.glob("wordcount_timing_*.json"))
    assert len(files) == 1
    data = json.loads(files[0].read_text())
    assert data[0]["strategy"] == "hashMap"
    assert len(data[0]["samples_ms"]) == 2
    expected_probe = Counter(corpus_file.read_text(encoding="utf-8").split())["map"]
    assert data[0]["probe"] == expected_probe


def test_verify_succeeds(corpus_file):
    result = runner.invoke(app, ["verify", "--corpus", str(corpus_file)])

    assert result.exit_code == 0, result.output
    assert "OK" in result.stdout


def test_verify_prints_markup_in_tokens_literally(corpus_file, monkeypatch):
    mismatch = CountMismatch("hashMap", "[/red][bold]", 2, 1)
    monkeypatch.setattr(cli, "verify_equivalence", lambda corpus, strategies: [mismatch])

    result = runner.invoke(app, ["verify", "--corpus", str(corpus_file)])

    assert result.exit_code == 1
    assert "'[/red][bold]' expected 2, got 1" in result.stdout


@pytest.mark.parametrize("value, expected", [
    ("debug", "DEBUG"),
    ("Info", "INFO"),
    ("LOUD", "WARNING"),
    ("", "WARNING"),
])
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("WORDCOUNT_LOG_LEVEL", value)

    assert cli._log_level_from_env() == expected


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("WORDCOUNT_LOG_LEVEL", raising=False)

    assert cli._log_level_from_env() == "WARNING"


def test_strategies_lists_closed_set():
    result = runner.invoke(app, ["strategies"])

    assert result.exit_code == 0
    assert [line.split("\t")[0] for line in result.stdout.splitlines()] == list(STRATEGY_NAMES)


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
