"""Tests for the ``apidoc build`` command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from apidoc_pages import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the command from reconfiguring the root logger during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)
    monkeypatch.chdir(tmp_path)


def _write_site(root: Path) -> None:
    data = root / "data"
    data.mkdir()
    (root / "template.html").write_text("<h1>{name}</h1>", encoding="utf-8")
    (data / "table-of-contents.json").write_text(
        json.dumps({"Core": ["Widget"]}), encoding="utf-8"
    )
    (data / "widget.json").write_text(json.dumps({"class": "Widget"}), encoding="utf-8")


def test_build_uses_defaults_and_prints_paths(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without a config file the default layout is built relative to cwd."""
    _write_site(tmp_path)
    cli.build()
    out = capsys.readouterr().out
    assert out.splitlines() == ["wrote pages/widget.html"], f"unexpected output {out!r}"
    page = tmp_path / "pages" / "widget.html"
    assert page.read_text(encoding="utf-8") == "<h1>Widget</h1>"


def test_build_applies_overrides(tmp_path: Path) -> None:
    """Command-line paths override the config file."""
    _write_site(tmp_path)
    config = tmp_path / "apidoc.yaml"
    config.write_text("build:\n  output_dir: ignored\n", encoding="utf-8")
    cli.build(config=config, output_dir=tmp_path / "dist")
    assert (tmp_path / "dist" / "widget.html").exists()
    assert not (tmp_path / "ignored").exists()


def test_build_exits_on_broken_descriptor(tmp_path: Path) -> None:
    """A broken descriptor aborts with a non-zero status."""
    _write_site(tmp_path)
    (tmp_path / "data" / "broken.json").write_text("{", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build()
    assert excinfo.value.code == 1
    assert not (tmp_path / "pages" / "widget.html").exists(), (
        "expected the build to stop at broken.json before widget.json"
    )


def test_build_reads_input_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``INPUT_OUTPUT_DIR`` overrides the output folder through the app."""
    _write_site(tmp_path)
    monkeypatch.setenv("INPUT_OUTPUT_DIR", str(tmp_path / "from-env"))
    try:
        cli.app(["build"])
    except SystemExit as exc:
        assert exc.code in (None, 0), f"unexpected exit status {exc.code!r}"
    assert (tmp_path / "from-env" / "widget.html").exists(), (
        "expected the page in the folder named by INPUT_OUTPUT_DIR"
    )
    assert not (tmp_path / "pages").exists()


def test_build_rejects_unknown_log_level(tmp_path: Path) -> None:
    """A misspelt log level is an error rather than a silent fallback."""
    _write_site(tmp_path)
    with pytest.raises(ValueError, match="Unknown log level 'verbose'"):
        cli.build(log_level="verbose")
    assert not (tmp_path / "pages").exists(), "expected nothing to be built"
