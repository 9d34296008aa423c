"""Tests for the doccrawl command-line entry point."""

import json
import runpy
from unittest.mock import AsyncMock, patch

import pytest

from doccrawl.main import format_summary, main
from doccrawl.models.report import CrawlReport, PageOutcome


class TestFormatSummary:
    def test_two_line_tally(self):
        assert format_summary(3, 1) == (
            "Crawl complete!\n"
            "   Success: 3 pages\n"
            "   Failed: 1 pages"
        )


class TestMain:
    @pytest.fixture(autouse=True)
    def keep_logging_config(self):
        """Leave the test session's logging handlers untouched."""
        with patch("doccrawl.main.logging.config.dictConfig") as dict_config:
            yield dict_config

    def test_runs_manifest_and_prints_tally(self, tmp_path, monkeypatch, capsys):
        manifest_file = tmp_path / "urls.json"
        manifest_file.write_text(
            json.dumps(
                {
                    "baseUrl": "https://docs.example.com",
                    "documentationAreas": {
                        "Guides": {
                            "outputDir": "content",
                            "pages": [{"url": "/a", "outputFile": "a.mdx"}],
                        }
                    },
                }
            ),
            encoding="utf-8",
        )
        monkeypatch.setenv("DOCCRAWL_MANIFEST", str(manifest_file))
        monkeypatch.setenv("DOCCRAWL_ROOT", str(tmp_path))

        report = CrawlReport(
            outcomes=[
                PageOutcome(
                    area="Guides",
                    url="https://docs.example.com/a",
                    success=False,
                    reason="fetch_failed",
                )
            ]
        )
        crawl = AsyncMock(return_value=report)
        with patch("doccrawl.main.crawl_documentation", new=crawl):
            main()

        manifest, root_dir = crawl.await_args.args
        assert manifest.base_url == "https://docs.example.com"
        assert root_dir == tmp_path
        out = capsys.readouterr().out
        assert "Success: 0 pages" in out
        assert "Failed: 1 pages" in out

    def test_missing_manifest_propagates(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCCRAWL_MANIFEST", str(tmp_path / "absent.json"))

        with pytest.raises(FileNotFoundError):
            main()


class TestModuleEntryPoint:
    def test_python_dash_m_runs_main(self, tmp_path, monkeypatch, capsys):
        manifest_file = tmp_path / "urls.json"
        manifest_file.write_text(
            json.dumps({"baseUrl": "https://docs.example.com", "documentationAreas": {}}),
            encoding="utf-8",
        )
        monkeypatch.setenv("DOCCRAWL_MANIFEST", str(manifest_file))
        monkeypatch.setenv("DOCCRAWL_ROOT", str(tmp_path))

        crawl = AsyncMock(return_value=CrawlReport())
        with (
            patch("doccrawl.main.logging.config.dictConfig"),
            patch("doccrawl.main.crawl_documentation", new=crawl),
        ):
            runpy.run_module("doccrawl", run_name="__main__")

        crawl.assert_awaited_once()
        assert "Success: 0 pages" in capsys.readouterr().out
