"""Tests for the Textual TUI."""

from __future__ import annotations

from pathlib import Path

import pytest
from textual.pilot import Pilot
from textual.widgets import Button, DataTable, Static, Switch

from dashify.tui import DashifyApp, tui_main


async def _settle(app: DashifyApp, pilot: Pilot[int]) -> None:
    """Let pending messages run, then wait for scan and apply workers."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestDashifyApp:
    @pytest.fixture
    def clean_dir(self, tmp_path: Path) -> Path:
        (tmp_path / "safe-file.txt").touch()
        (tmp_path / "README.md").touch()
        return tmp_path

    @pytest.fixture
    def dirty_dir(self, tmp_path: Path) -> Path:
        (tmp_path / "File Name.txt").touch()
        (tmp_path / "snake_case.txt").touch()
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "XMLParser.java").touch()
        return tmp_path

    @pytest.mark.asyncio
    async def test_clean_directory_shows_no_renames(self, clean_dir: Path) -> None:
        app = DashifyApp(root=clean_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            table: DataTable[str] = app.query_one(  # pyright: ignore[reportUnknownVariableType]
                "#rename-table", DataTable
            )
            assert table.row_count == 0
            apply_btn = app.query_one("#apply-btn", Button)
            assert apply_btn.disabled is True

    @pytest.mark.asyncio
    async def test_dirty_directory_populates_table(self, dirty_dir: Path) -> None:
        app = DashifyApp(root=dirty_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            table: DataTable[str] = app.query_one(  # pyright: ignore[reportUnknownVariableType]
                "#rename-table", DataTable
            )
            assert table.row_count == 2  # File Name.txt and sub/XMLParser.java
            apply_btn = app.query_one("#apply-btn", Button)
            assert apply_btn.disabled is False

    @pytest.mark.asyncio
    async def test_flat_scan(self, dirty_dir: Path) -> None:
        app = DashifyApp(root=dirty_dir, recursive=False)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            table: DataTable[str] = app.query_one(  # pyright: ignore[reportUnknownVariableType]
                "#rename-table", DataTable
            )
            assert table.row_count == 1

    @pytest.mark.asyncio
    async def test_rescan_with_force_dash(self, dirty_dir: Path) -> None:
        app = DashifyApp(root=dirty_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            app.query_one("#force-dash", Switch).value = True
            await pilot.click("#rescan-btn")
            await _settle(app, pilot)
            table: DataTable[str] = app.query_one(  # pyright: ignore[reportUnknownVariableType]
                "#rename-table", DataTable
            )
            assert table.row_count == 3

    @pytest.mark.asyncio
    async def test_apply_renames_files(self, dirty_dir: Path) -> None:
        app = DashifyApp(root=dirty_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            await pilot.click("#apply-btn")
            await _settle(app, pilot)
            assert (dirty_dir / "file-name.txt").exists()
            assert not (dirty_dir / "File Name.txt").exists()
            assert (dirty_dir / "sub" / "xml-parser.java").exists()
            assert (dirty_dir / "snake_case.txt").exists()
            assert list(dirty_dir.glob("rename_log_*.json"))
            apply_btn = app.query_one("#apply-btn", Button)
            assert apply_btn.disabled is True

    @pytest.mark.asyncio
    async def test_detail_panel_updates_on_row_highlight(self, dirty_dir: Path) -> None:
        app = DashifyApp(root=dirty_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            detail_header = app.query_one("#detail-header", Static)
            assert str(detail_header.render()) != ""
            table: DataTable[str] = app.query_one(  # pyright: ignore[reportUnknownVariableType]
                "#rename-table", DataTable
            )
            table.focus()
            await pilot.press("down")
            await pilot.pause()
            assert len(app.row_actions) == 2

    @pytest.mark.asyncio
    async def test_quit_keybinding(self, clean_dir: Path) -> None:
        app = DashifyApp(root=clean_dir)
        async with app.run_test(size=(160, 40)) as pilot:
            await _settle(app, pilot)
            await pilot.press("q")


class TestTuiMain:
    def test_invalid_path_returns_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = tui_main([str(tmp_path / "nonexistent")])
        assert result == 1
        captured = capsys.readouterr()
        assert "not a directory" in captured.err

    def test_file_path_returns_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        f = tmp_path / "file.txt"
        f.touch()
        result = tui_main([str(f)])
        assert result == 1
        captured = capsys.readouterr()
        assert "not a directory" in captured.err
