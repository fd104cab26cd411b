"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from main import CLIArgs, run


def _write_feed(tmp_path: Path, count: int) -> Path:
    feed = {
        "lastUpdated": "2026-10-18T06:00:00Z",
        "articles": [
            {
                "title": f"Northern territories update {i}",
                "url": f"https://example.com/{i}",
                "source": "Example Shimbun",
                "publishedAt": "2026-10-18T03:15:00Z",
            }
            for i in range(count)
        ],
    }
    path = tmp_path / "articles.json"
    path.write_text(json.dumps(feed), encoding="utf-8")
    return path


def _write_config(tmp_path: Path, feed_path: Path, batch_size: int = 2) -> Path:
    config = tmp_path / "config.yaml"
    config.write_text(
        f"source:\n  type: file\n  path: {feed_path}\nreveal:\n  batch_size: {batch_size}\n",
        encoding="utf-8",
    )
    return config


async def test_run_prints_requested_pages(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config = _write_config(tmp_path, _write_feed(tmp_path, 5))

    code = await run(CLIArgs(config=config, pages=2))

    out = capsys.readouterr().out
    assert code == 0
    assert "4. Northern territories update 3" in out
    assert "5. Northern territories update 4" not in out


async def test_run_reports_end_of_results(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config = _write_config(tmp_path, _write_feed(tmp_path, 3))

    await run(CLIArgs(config=config, pages=5))

    out = capsys.readouterr().out
    assert "3. Northern territories update 2" in out
    assert "end of results" in out


async def test_run_load_failure_exits_nonzero(tmp_path: Path) -> None:
    config = _write_config(tmp_path, tmp_path / "missing.json")

    assert await run(CLIArgs(config=config)) == 1


def test_cli_args_require_existing_config(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Config file not found"):
        CLIArgs(config=tmp_path / "nope.yaml")
