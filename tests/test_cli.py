"""Tests for the pairtok command-line front end and its settings."""

import logging

import pytest

from pairtok import cli, config
from pairtok.errors import ConfigError


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def corpus_file(tmp_path):
    """Write a small training corpus to disk."""
    path = tmp_path / "data.txt"
    path.write_text("hello world hello world the the the\n", encoding="utf-8")
    return path


# CLI
# ---------------------------------------------------------------------------


def test_cli_single_text(corpus_file, capsys):
    """--text trains, registers the default special token and round-trips once."""
    status = cli.main([str(corpus_file), "--vocab-size", "270", "--text", "hello<|endoftext|>"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Training complete:" in out
    assert "Added special token <|endoftext|> with ID" in out
    assert "Decoded: hello<|endoftext|>" in out


def test_cli_interactive_loop(corpus_file, capsys, monkeypatch):
    """The prompt loop encodes each line until 'q'."""
    answers = iter(["the world", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    status = cli.main([str(corpus_file), "--vocab-size", "270", "--special", "<END>"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("Encoded:") == 1
    assert "Decoded: the world" in out
    assert "Added special token <END> with ID" in out


def test_cli_stops_on_eof(corpus_file, monkeypatch):
    """End of input ends the prompt loop cleanly."""

    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert cli.main([str(corpus_file), "--vocab-size", "270"]) == 0


def test_cli_empty_corpus_fails(tmp_path):
    """An empty corpus is refused."""
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert cli.main([str(path), "--text", "x"]) == 1


def test_cli_missing_corpus_fails(tmp_path):
    """A missing corpus file is reported as a failure."""
    assert cli.main([str(tmp_path / "missing.txt"), "--text", "x"]) == 1


def test_cli_requires_a_source():
    """Either a path or a dataset must be given."""
    assert cli.main(["--text", "x"]) == 1


def test_cli_rejects_small_vocab(corpus_file):
    """A vocab size of 256 is a configuration error."""
    assert cli.main([str(corpus_file), "--vocab-size", "256", "--text", "x"]) == 1


def test_cli_vocab_size_from_env(corpus_file, capsys, monkeypatch):
    """The default max vocab size can come from the environment."""
    monkeypatch.setenv(config.MAX_VOCAB_SIZE_ENV, "258")
    assert cli.main([str(corpus_file), "--text", "x"]) == 0
    assert "Final vocabulary size: 258" in capsys.readouterr().out


# Settings
# ---------------------------------------------------------------------------


def test_default_max_vocab_size(monkeypatch):
    """Without an override the default max vocab size applies."""
    monkeypatch.delenv(config.MAX_VOCAB_SIZE_ENV, raising=False)
    assert config.default_max_vocab_size() == config.DEFAULT_MAX_VOCAB_SIZE


@pytest.mark.parametrize("raw", ["abc", "100", "256"])
def test_invalid_max_vocab_size_env(monkeypatch, raw):
    """Non-integer or too small overrides are rejected."""
    monkeypatch.setenv(config.MAX_VOCAB_SIZE_ENV, raw)
    with pytest.raises(ConfigError):
        config.default_max_vocab_size()


def test_log_level_env(monkeypatch):
    """The log level is read from the environment by name."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
    assert config.log_level() == logging.DEBUG
    monkeypatch.delenv(config.LOG_LEVEL_ENV)
    assert config.log_level() == logging.WARNING


def test_invalid_log_level_env(monkeypatch):
    """Unknown level names are rejected."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
    with pytest.raises(ConfigError):
        config.log_level()
