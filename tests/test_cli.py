"""Tests for the wordcount CLI module."""

import json

import yaml
from typer.testing import CliRunner

from wordcount import __version__
from wordcount.cli import app
from wordcount.config import WordcountConfig, load_config, save_config


runner = CliRunner()


class TestCliBasics:
    """Test basic CLI functionality."""

    def test_help_shows_commands(self):
        """Test that --help shows all main commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "count" in result.output
        assert "info" in result.output
        assert "config" in result.output

    def test_version_flag(self):
        """Test --version flag displays version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "wordcount" in result.output
        assert __version__ in result.output

    def test_verbosity_flag_accepted(self):
        """Test -v flag is accepted."""
        result = runner.invoke(app, ["-v", "--help"])
        assert result.exit_code == 0


class TestInfoCommand:
    """Test the info command."""

    def test_info_shows_system_info(self):
        """Test info command shows system information."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "wordcount Version" in result.output
        assert "Python Version" in result.output
        assert "Platform" in result.output

    def test_info_shows_dependencies(self):
        """Test info command shows dependency status."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Dependencies" in result.output
        assert "polars" in result.output
        assert "typer" in result.output

    def test_info_shows_config(self):
        """Test info command shows configuration."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Configuration" in result.output
        assert "Config File" in result.output


class TestConfigCommand:
    """Test the config command."""

    def test_config_show(self):
        """Test config show displays settings."""
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "mode" in result.output
        assert "output_format" in result.output

    def test_config_path(self):
        """Test config path shows file location."""
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert ".wordcount" in result.output
        assert "config.yaml" in result.output

    def test_config_help(self):
        """Test config subcommand help."""
        result = runner.invoke(app, ["config", "--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "set" in result.output
        assert "reset" in result.output

    def test_config_set_saves_value(self):
        """Test config set writes a typed value."""
        result = runner.invoke(app, ["config", "set", "top", "3"])
        assert result.exit_code == 0
        assert load_config().top == 3

    def test_config_set_rejects_bad_value(self):
        """Test config set exits with an error on invalid input."""
        result = runner.invoke(app, ["config", "set", "mode", "sentence"])
        assert result.exit_code == 1
        assert load_config() == WordcountConfig()

    def test_config_reset(self, isolated_config):
        """Test config reset removes the file."""
        save_config(WordcountConfig(mode="line"))

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not (isolated_config / "config.yaml").exists()


class TestCountCommand:
    """Test the count subcommand."""

    def test_count_help(self):
        """Test count --help shows commands."""
        result = runner.invoke(app, ["count", "--help"])
        assert result.exit_code == 0
        assert "count-units" in result.output

    def test_count_units_help(self):
        """Test count-units --help shows options."""
        result = runner.invoke(app, ["count", "count-units", "--help"])
        assert result.exit_code == 0
        assert "--mode" in result.output
        assert "--dry-run" in result.output
        assert "--format" in result.output

    def test_count_words_to_stdout(self, sample_text_file):
        """Test default word counting printed as TSV."""
        result = runner.invoke(app, ["count", "count-units", str(sample_text_file)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "unit\tcount"
        assert lines[1] == "the\t5"

    def test_count_lines_json_to_file(self, sample_text_file, tmp_output_dir):
        """Test line counting written as JSON to an output file."""
        out = tmp_output_dir / "lines.json"
        result = runner.invoke(
            app,
            ["count", "count-units", str(sample_text_file), "-m", "line", "-f", "json", "-o", str(out)],
        )
        assert result.exit_code == 0
        records = json.loads(out.read_text())
        assert {"unit": "the dog sat", "count": 1} in records

    def test_count_chars_from_stdin(self):
        """Test reading standard input with the mode given in upper case."""
        result = runner.invoke(
            app,
            ["count", "count-units", "--mode", "CHAR", "--format", "yaml"],
            input="abba",
        )
        assert result.exit_code == 0
        assert yaml.safe_load(result.output) == {"a": 2, "b": 2}

    def test_top_option(self, sample_text_file):
        """Test that --top limits the printed rows."""
        result = runner.invoke(app, ["count", "count-units", str(sample_text_file), "--top", "2"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 3

    def test_missing_input_file(self, tmp_path):
        """Test that a missing file exits with an error panel."""
        result = runner.invoke(app, ["count", "count-units", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "File Not Found" in result.output

    def test_invalid_utf8_input(self, invalid_text_file):
        """Test that undecodable input is reported and exits with code 1."""
        result = runner.invoke(app, ["count", "count-units", str(invalid_text_file)])
        assert result.exit_code == 1
        assert "Error during unit counting" in result.output
        assert "unit\tcount" not in result.output

    def test_unknown_format(self, sample_text_file):
        """Test that an unsupported format is reported."""
        result = runner.invoke(app, ["count", "count-units", str(sample_text_file), "-f", "xml"])
        assert result.exit_code == 1
        assert "Unknown output format" in result.output

    def test_dry_run(self, sample_text_file, tmp_output_dir):
        """Test that --dry-run validates without writing output."""
        out = tmp_output_dir / "counts.tsv"
        result = runner.invoke(
            app,
            ["count", "count-units", str(sample_text_file), "-o", str(out), "--dry-run"],
        )
        assert result.exit_code == 0
        assert "Dry Run Mode" in result.output
        assert "Input Validation" in result.output
        assert not out.exists()

    def test_bad_config_value_does_not_break_counting(self, sample_text_file, isolated_config):
        """Test that an invalid top in the config file is ignored."""
        isolated_config.mkdir()
        (isolated_config / "config.yaml").write_text("top: many\n")

        result = runner.invoke(app, ["count", "count-units", str(sample_text_file)])
        assert result.exit_code == 0
        assert "the\t5" in result.output.splitlines()
        assert "dog\t1" in result.output.splitlines()

    def test_log_file_option(self, sample_text_file, tmp_path):
        """Test that --log-file receives the counting log messages."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            ["-v", "--log-file", str(log_file), "count", "count-units", str(sample_text_file)],
        )
        assert result.exit_code == 0
        assert "Counting word units" in log_file.read_text()

    def test_configured_mode_used(self, sample_text_file):
        """Test that the configured default mode applies when --mode is omitted."""
        save_config(WordcountConfig(mode="line"))

        result = runner.invoke(app, ["count", "count-units", str(sample_text_file)])
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "the cat sat on the mat\t2"
