from pathlib import Path

from bookshelf.__main__ import build_parser, connect_settings, main, resolve_catalog_path
from bookshelf.core.catalog.loader import default_catalog_path
from bookshelf.core.config import ConfigManager
from bookshelf.ui.catalog.catalog_viewmodel import CatalogViewModel
from bookshelf.ui.catalog.controllers.sticky_controller import StickyMode
from bookshelf.ui.catalog.signal_sources import SignalScrollSource, SignalViewportProvider


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.catalog is None
    assert args.config == "config.json"
    assert not args.debug


def test_resolve_catalog_path():
    assert resolve_catalog_path("cli.json", "config.json") == Path("cli.json")
    assert resolve_catalog_path(None, "config.json") == Path("config.json")
    assert resolve_catalog_path(None, "") == default_catalog_path()


def test_missing_catalog_exits_with_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    code = main([str(tmp_path / "missing.json"), "--config", str(tmp_path / "config.json")])

    assert code == 1
    assert (tmp_path / "config.json").exists()


def test_setting_changes_reach_viewmodel(qapp, tmp_path, large_catalog):
    manager = ConfigManager(str(tmp_path / "config.json"))
    vm = CatalogViewModel(large_catalog, manager.data)
    connect_settings(manager, vm)
    viewport = SignalViewportProvider(1300, 900)
    scroll = SignalScrollSource()

    with vm.attached(viewport, scroll):
        scroll.scroll_to(300)
        assert vm.sticky_state.is_pinned

        manager.update("scroll", "pin_offset", 500)
        assert vm.sticky_controller.pin_offset == 500
        assert vm.sticky_state.mode is StickyMode.NORMAL

        manager.update("layout", "min_results_floor", 50)
        assert vm.min_results == 50


def test_general_settings_do_not_touch_viewmodel(qapp, tmp_path, large_catalog):
    manager = ConfigManager(str(tmp_path / "config.json"))
    vm = CatalogViewModel(large_catalog, manager.data)
    connect_settings(manager, vm)
    on_min = []
    vm.minResultsChanged.connect(on_min.append)

    manager.update("general", "window_width", 1600)

    assert on_min == []
