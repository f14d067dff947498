"""
Bookshelf application entry point.

Usage:
    python -m bookshelf [CATALOG] [--config PATH] [--debug]
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from bookshelf.core.catalog.loader import CatalogLoadError, default_catalog_path, load_catalog
from bookshelf.core.config import ConfigManager
from bookshelf.core.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description="Browse a curated catalog of books by technology",
    )
    parser.add_argument("catalog", nargs="?", help="Catalog JSON file (default: bundled sample)")
    parser.add_argument("--config", default="config.json", help="Settings file (.json or .toml)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def resolve_catalog_path(cli_path: Optional[str], configured_path: str) -> Path:
    """Command line wins over config; the bundled sample is the fallback."""
    if cli_path:
        return Path(cli_path)
    if configured_path:
        return Path(configured_path)
    return default_catalog_path()


LIVE_SECTIONS = ("layout", "scroll")


def connect_settings(config_manager: ConfigManager, viewmodel) -> None:
    """Push layout and scroll setting changes into a running CatalogViewModel."""

    def on_changed(section: str, key: str, value):
        if section in LIVE_SECTIONS:
            logger.info(f"Setting {section}.{key} changed to {value!r}")
            viewmodel.apply_settings(config_manager.data)

    config_manager.on_changed.connect(on_changed)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.config)
    config = config_manager.data
    setup_logging(debug_mode=args.debug or config.general.debug_mode, log_dir=config.general.log_dir)

    catalog_path = resolve_catalog_path(args.catalog, config.general.catalog_path)
    try:
        index = load_catalog(catalog_path)
    except CatalogLoadError as e:
        logger.error(str(e))
        return 1

    from PySide6.QtWidgets import QApplication
    from bookshelf.ui.catalog import CatalogViewModel
    from bookshelf.ui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    viewmodel = CatalogViewModel(index, config)
    connect_settings(config_manager, viewmodel)
    window = MainWindow(viewmodel, config)
    window.show()
    logger.info("Bookshelf started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
