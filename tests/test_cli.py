"""Tests for the command-line dump tool."""

from pathlib import Path
from typing import List

import orjson
import pytest

from mhw_data_reader.__main__ import main

from helpers import build_gmd, build_itm, build_itm_record


@pytest.fixture
def gmd_file(tmp_path: Path) -> Path:
    path = tmp_path / "item_eng.gmd"
    path.write_bytes(
        build_gmd(
            ["I_0000_NAME", "I_0001_NAME"],
            ["Potion", "Restores health", "Mega Potion", "Restores more"],
            info_indexes=[0, 2],
        )
    )
    return path


@pytest.fixture
def itm_file(tmp_path: Path) -> Path:
    path = tmp_path / "itemData.itm"
    path.write_bytes(build_itm([build_itm_record(1, rarity=2), build_itm_record(9)]))
    return path


def run_cli(settings_file: Path, *args: str) -> int:
    argv: List[str] = ["--settings", str(settings_file), *args]
    return main(argv)


class TestGmdCommand:
    """Test the gmd subcommand."""

    def test_dumps_entries(
        self, settings_file: Path, gmd_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the gmd command dumps every entry."""
        assert run_cli(settings_file, "gmd", str(gmd_file)) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "'I_0000_NAME' = 'Potion'",
            "None = 'Restores health'",
            "'I_0001_NAME' = 'Mega Potion'",
            "None = 'Restores more'",
        ]

    def test_json_output(
        self, settings_file: Path, gmd_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the gmd command with JSON output."""
        assert run_cli(settings_file, "--format", "json", "gmd", str(gmd_file)) == 0
        data = orjson.loads(capsys.readouterr().out)
        assert len(data["entries"]) == 4

    def test_invalid_file(
        self, settings_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a bad GMD file exits with an error."""
        bad = tmp_path / "bad.gmd"
        bad.write_bytes(b"NOPE")
        assert run_cli(settings_file, "gmd", str(bad)) == 1
        assert capsys.readouterr().err.count("Invalid magic") == 1

    def test_missing_file(
        self, settings_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a missing file exits with an error."""
        assert run_cli(settings_file, "gmd", str(tmp_path / "missing.gmd")) == 1
        assert "not found" in capsys.readouterr().err


class TestItmCommand:
    """Test the itm subcommand."""

    def test_dumps_items(
        self, settings_file: Path, itm_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the itm command dumps every item."""
        assert run_cli(settings_file, "itm", str(itm_file)) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("'ITEM_00001' = ")
        assert lines[1].startswith("'ITEM_00009' = ")

    def test_link_names(
        self,
        settings_file: Path,
        itm_file: Path,
        gmd_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test --link assigns item names."""
        code = run_cli(
            settings_file, "--format", "json", "itm", str(itm_file), "--link", str(gmd_file)
        )
        assert code == 0
        entries = orjson.loads(capsys.readouterr().out)["entries"]
        assert [entry["name"] for entry in entries] == ["Mega Potion", None]

    def test_link_offset_override(
        self,
        settings_file: Path,
        itm_file: Path,
        gmd_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test --offset overrides the settings."""
        code = run_cli(
            settings_file,
            "--format",
            "json",
            "itm",
            str(itm_file),
            "-l",
            str(gmd_file),
            "--offset",
            "1",
        )
        assert code == 0
        entries = orjson.loads(capsys.readouterr().out)["entries"]
        assert entries[0]["name"] == "Restores more"

    def test_link_uses_settings(
        self,
        settings_file: Path,
        itm_file: Path,
        gmd_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the stride is read from settings."""
        from mhw_data_reader.settings import AppSettings

        AppSettings(settings_file=settings_file).name_stride = 1
        code = run_cli(
            settings_file, "--format", "json", "itm", str(itm_file), "--link", str(gmd_file)
        )
        assert code == 0
        entries = orjson.loads(capsys.readouterr().out)["entries"]
        assert entries[0]["name"] == "Restores health"

    def test_invalid_stride(
        self, settings_file: Path, itm_file: Path, gmd_file: Path
    ) -> None:
        """Test a zero stride exits with an error."""
        code = run_cli(
            settings_file, "itm", str(itm_file), "--link", str(gmd_file), "--stride", "0"
        )
        assert code == 1

    def test_subcommand_required(self, settings_file: Path) -> None:
        """Test a missing subcommand is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            run_cli(settings_file)
        assert exc_info.value.code == 2


class TestLogLevelOption:
    """Test --log-level parsing."""

    def test_lowercase_level_accepted(
        self, settings_file: Path, gmd_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test level names are accepted in any case."""
        assert run_cli(settings_file, "--log-level", "debug", "gmd", str(gmd_file)) == 0
        assert "'I_0000_NAME' = 'Potion'" in capsys.readouterr().out

    @pytest.mark.parametrize("level", ["degub", "basic_format", "NOTSET"])
    def test_unknown_level_is_usage_error(
        self, settings_file: Path, gmd_file: Path, level: str
    ) -> None:
        """Test names outside the supported levels are rejected by the parser."""
        with pytest.raises(SystemExit) as exc_info:
            run_cli(settings_file, "--log-level", level, "gmd", str(gmd_file))
        assert exc_info.value.code == 2
