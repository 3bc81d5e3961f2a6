"""
Integration tests for the ways the extractor can be launched.

Verifies that the console script, ``python -m`` and the root script all
reach the same Click command.
"""

import runpy
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).parent.parent.parent


class TestEntryPoints:
    def test_module_entry_point(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["goodreads-cookies", "--help"])
        sys.modules.pop("goodreads_cookies.__main__", None)
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_module("goodreads_cookies", run_name="__main__")
        assert excinfo.value.code == 0
        assert "--user-id" in capsys.readouterr().out

    def test_root_script(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["extract_goodreads_cookies.py", "--help"])
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_path(str(ROOT / "extract_goodreads_cookies.py"), run_name="__main__")
        assert excinfo.value.code == 0
        assert "--output" in capsys.readouterr().out

    def test_full_run_with_root_script(self, monkeypatch, firefox_dir, tmp_path):
        output = tmp_path / "goodreads_config.json"
        monkeypatch.setattr(
            sys,
            "argv",
            ["extract_goodreads_cookies.py", "--firefox-dir", str(firefox_dir), "--user-id", "9"],
        )
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_path(str(ROOT / "extract_goodreads_cookies.py"), run_name="__main__")
        assert excinfo.value.code == 0
        assert output.exists()
