"""Tests for the filescan and fileinspector commands."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from safeinput_toolkit.commands.filescan import fileinspector
from safeinput_toolkit.commands.filescan import filescan
from safeinput_toolkit.file_selection import StaticFileSelector


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("hello world\nfoo\n", encoding="utf-8")
    return path


def patch_dialog(selected):
    """Replace the native dialog with one that returns ``selected``."""
    return patch(
        "safeinput_toolkit.commands.filescan.TkFileSelector",
        return_value=StaticFileSelector(selected),
    )


class TestFilescan:
    def test_scans_path_argument(self, runner, sample_file):
        result = runner.invoke(filescan, [str(sample_file)])

        assert result.exit_code == 0, result.output
        assert "hello world" in result.output
        assert "File name: sample.txt" in result.output
        assert "Number of lines: 2" in result.output
        assert "Number of words: 3" in result.output
        assert "Number of characters: 14" in result.output

    def test_path_argument_skips_dialog(self, runner, sample_file):
        with patch("safeinput_toolkit.commands.filescan.TkFileSelector") as dialog:
            result = runner.invoke(filescan, [str(sample_file)])

        assert result.exit_code == 0
        dialog.return_value.select_file.assert_not_called()

    def test_path_argument_ignores_broken_settings(self, runner, sample_file):
        settings_file = Path(".safeinput") / "settings.yaml"
        settings_file.parent.mkdir()
        settings_file.write_text("output_dir:\n  nested: true\n", encoding="utf-8")

        result = runner.invoke(filescan, [str(sample_file)])

        assert result.exit_code == 0, result.output
        assert "Number of lines: 2" in result.output

    def test_too_many_arguments_prints_usage(self, runner, sample_file):
        with patch("safeinput_toolkit.commands.filescan.TkFileSelector") as dialog:
            result = runner.invoke(filescan, [str(sample_file), str(sample_file)])

        assert result.exit_code == 0
        assert "Usage: filescan [filename]" in result.stdout
        assert "--- File Summary ---" not in result.output
        dialog.assert_not_called()

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(filescan, [str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "not found or is not a valid file." in result.output
        assert "File Content:" not in result.output

    def test_directory_is_rejected(self, runner, tmp_path):
        result = runner.invoke(filescan, [str(tmp_path)])

        assert result.exit_code == 1
        assert "not found or is not a valid file." in result.output

    def test_read_error_reported_without_summary(self, runner, tmp_path):
        path = tmp_path / "binary.dat"
        path.write_bytes(b"\xff\xfe\xfa\n")

        result = runner.invoke(filescan, [str(path)])

        assert result.exit_code == 1
        assert "Error reading file:" in result.output
        assert "--- File Summary ---" not in result.output

    def test_no_argument_uses_dialog(self, runner, sample_file):
        with patch_dialog(sample_file):
            result = runner.invoke(filescan, [])

        assert result.exit_code == 0, result.output
        assert "Number of lines: 2" in result.output

    def test_cancelled_dialog(self, runner):
        with patch_dialog(None):
            result = runner.invoke(filescan, [])

        assert result.exit_code == 0
        assert "File selection cancelled." in result.output
        assert "Error" not in result.output
        assert "--- File Summary ---" not in result.output

    def test_start_dir_option_reaches_dialog(self, runner, tmp_path):
        with patch_dialog(None) as dialog:
            runner.invoke(filescan, ["--start-dir", str(tmp_path)])

        dialog.assert_called_once_with(tmp_path)

    def test_start_dir_defaults_to_setting(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("SAFEINPUT_START_DIR", str(tmp_path / "docs"))

        with patch_dialog(None) as dialog:
            runner.invoke(filescan, [])

        dialog.assert_called_once_with(tmp_path / "docs")


class TestFileinspector:
    def test_scans_selected_file(self, runner, sample_file):
        with patch_dialog(sample_file):
            result = runner.invoke(fileinspector, [])

        assert result.exit_code == 0, result.output
        assert "hello world" in result.output
        assert "Number of characters: 14" in result.output

    def test_cancelled_dialog(self, runner):
        with patch_dialog(None):
            result = runner.invoke(fileinspector, [])

        assert result.exit_code == 0
        assert "File selection cancelled." in result.output

    def test_takes_no_path_argument(self, runner, sample_file):
        result = runner.invoke(fileinspector, [str(sample_file)])
        assert result.exit_code == 2

    def test_default_start_dir_is_src(self, runner):
        with patch_dialog(None) as dialog:
            runner.invoke(fileinspector, [])

        dialog.assert_called_once_with(Path("src"))
