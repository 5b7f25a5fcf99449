"""Tests for the management CLI argument handling."""

import sys

import pytest

import manage


class TestImportCommand:
    def test_missing_file_is_a_usage_error(self, monkeypatch, tmp_path, capsys):
        missing = tmp_path / "nope.json"
        monkeypatch.setattr(sys, "argv", ["manage.py", "import", str(missing)])

        with pytest.raises(SystemExit) as exc_info:
            manage.main()

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert "can't open" in err
        assert "Traceback" not in err
