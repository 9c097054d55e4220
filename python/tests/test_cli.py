"""
Tests for lexshift.cli - the command-line tool.
"""

import io
import logging

import pytest

from lexshift.cli import CONFIG_ENV_VAR, build_parser, main


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's LEXSHIFT_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestOperations:
    """Tests for the transform subcommands."""

    def test_pluralize(self, capsys):
        assert main(["pluralize", "person", "octopus"]) == 0
        assert capsys.readouterr().out == "people\noctopi\n"

    def test_pluralize_with_count(self, capsys):
        assert main(["pluralize", "person", "--count", "1"]) == 0
        assert capsys.readouterr().out == "person\n"

    def test_camelize_lower(self, capsys):
        assert main(["camelize", "--lower", "active_model/errors"]) == 0
        assert capsys.readouterr().out == "activeModel::Errors\n"

    def test_parameterize_separator(self, capsys):
        assert main(["parameterize", "--separator", "_", "Donald E. Knuth"]) == 0
        assert capsys.readouterr().out == "donald_e_knuth\n"

    def test_options_between_words(self, capsys):
        """Options may appear before, between or after the words."""
        assert main(["pluralize", "--count", "2", "person", "--verbose", "octopus"]) == 0
        assert capsys.readouterr().out == "people\noctopi\n"

    def test_foreign_key(self, capsys):
        assert main(["foreign-key", "Admin::Post"]) == 0
        assert capsys.readouterr().out == "post_id\n"

    def test_reads_stdin_without_words(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("HTMLTidy\nSpecialGuest\n"))
        assert main(["underscore"]) == 0
        assert capsys.readouterr().out == "html_tidy\nspecial_guest\n"

    def test_ordinalize_rejects_non_numbers(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="lexshift"):
            assert main(["ordinalize", "3", "three"]) == 1
        assert capsys.readouterr().out == "3rd\n"
        assert "Cannot ordinalize 'three'" in caplog.text

    def test_unknown_operation(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["conjugate", "run"])


class TestConfig:
    """Tests for --config and the environment variable."""

    def test_config_flag(self, capsys, sample_config):
        assert main(["pluralize", "goose", "--config", str(sample_config)]) == 0
        assert capsys.readouterr().out == "geese\n"

    def test_config_env_var(self, capsys, sample_config, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(sample_config))
        assert main(["pluralize", "goose"]) == 0
        assert capsys.readouterr().out == "geese\n"

    def test_config_does_not_touch_default_engine(self, capsys, sample_config):
        import lexshift

        main(["pluralize", "goose", "--config", str(sample_config)])
        assert lexshift.pluralize("goose") == "gooses"

    def test_bad_config(self, capsys, config_file, caplog):
        path = config_file("verbs: []\n")
        with caplog.at_level(logging.ERROR, logger="lexshift"):
            assert main(["pluralize", "goose", "--config", str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "Could not load inflection config" in caplog.text

    def test_config_with_non_string_word(self, capsys, config_file, caplog):
        """A malformed entry is reported as a config error, not a traceback."""
        path = config_file("uncountables:\n  - {word: 5}\n")
        with caplog.at_level(logging.ERROR, logger="lexshift"):
            assert main(["pluralize", "--config", str(path), "cow"]) == 1
        assert capsys.readouterr().out == ""
        assert "must be a string" in caplog.text

    def test_log_dir(self, capsys, sample_config, tmp_path):
        log_dir = tmp_path / "logs"
        assert main(["pluralize", "goose", "--config", str(sample_config), "--log-dir", str(log_dir), "-v"]) == 0
        log_files = list(log_dir.glob("lexshift-*.log"))
        assert len(log_files) == 1
        assert "Loaded inflection config" in log_files[0].read_text(encoding="utf-8")
