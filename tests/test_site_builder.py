"""Tests for ``SiteBuilder`` enumeration, output naming, and logging."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from apidoc_pages.config import BuildConfig
from apidoc_pages.generator import SiteBuilder

LOGGER = logging.getLogger("apidoc.test")


def _config(tmp_path: Path, **overrides: object) -> BuildConfig:
    data_dir = tmp_path / "data"
    data_dir.mkdir(exist_ok=True)
    template = tmp_path / "template.html"
    template.write_text("<nav>{tableOfContents}</nav><h1>{name}</h1>", encoding="utf-8")
    values: dict[str, object] = {
        "template_path": template,
        "source_dir": data_dir,
        "output_dir": tmp_path / "out" / "nested" / "pages",
    }
    values.update(overrides)
    return BuildConfig(**values)  # type: ignore[arg-type]


def _module(config: BuildConfig, name: str, class_name: str) -> None:
    (config.source_dir / name).write_text(
        json.dumps({"class": class_name}), encoding="utf-8"
    )


def test_run_creates_output_dir_and_names_pages(tmp_path: Path) -> None:
    """Pages are named after descriptor stems inside a freshly created folder."""
    config = _config(tmp_path)
    _module(config, "sound-player.json", "Sound Player")
    _module(config, "a.b.json", "Dotted")

    written = SiteBuilder(config, logger=LOGGER).run()

    assert [path.name for path in written] == ["a.b.html", "sound-player.html"], (
        f"expected sorted stem-based names, got {written!r}"
    )
    assert config.output_dir.is_dir(), "expected the nested output dir to exist"
    html = (config.output_dir / "sound-player.html").read_text(encoding="utf-8")
    assert html == "<nav></nav><h1>Sound Player</h1>", (
        "expected a missing table of contents to render as empty navigation"
    )


def test_run_skips_toc_ignored_and_non_json(tmp_path: Path) -> None:
    """The table of contents, ignored names, and other files produce no page."""
    config = _config(tmp_path, ignore=("draft.json",))
    (config.source_dir / "table-of-contents.json").write_text(
        json.dumps({"Core": ["Widget"]}), encoding="utf-8"
    )
    _module(config, "widget.json", "Widget")
    _module(config, "draft.json", "Draft")
    (config.source_dir / "notes.txt").write_text("ignore me", encoding="utf-8")

    written = SiteBuilder(config, logger=LOGGER).run()

    assert [path.name for path in written] == ["widget.html"]
    html = written[0].read_text(encoding="utf-8")
    assert 'class="toc-current"' in html, "expected the Widget link to be current"


def test_run_with_custom_extension(tmp_path: Path) -> None:
    """The configured page extension replaces ``.json``."""
    config = _config(tmp_path, page_extension=".htm")
    _module(config, "widget.json", "Widget")
    written = SiteBuilder(config, logger=LOGGER).run()
    assert [path.name for path in written] == ["widget.htm"]


def test_run_logs_progress(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Each page build is announced on the injected logger."""
    config = _config(tmp_path)
    _module(config, "widget.json", "Widget")
    with caplog.at_level(logging.INFO, logger="apidoc.test"):
        SiteBuilder(config, logger=LOGGER).run()
    messages = [record.getMessage() for record in caplog.records]
    expected = f"Building page: {config.output_dir / 'widget.html'}"
    assert expected in messages, f"expected progress message, got {messages!r}"


def test_missing_template_renders_empty_pages(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """An unreadable template yields empty pages rather than aborting."""
    config = _config(tmp_path, template_path=tmp_path / "absent.html")
    _module(config, "widget.json", "Widget")
    with caplog.at_level(logging.WARNING):
        written = SiteBuilder(config, logger=LOGGER).run()
    assert written[0].read_text(encoding="utf-8") == ""
    assert "Could not load HTML template" in caplog.text
