from PySide6.QtWidgets import QMainWindow

from bookshelf.core.config import AppConfig
from bookshelf.ui.catalog import CatalogView, CatalogViewModel


class MainWindow(QMainWindow):
    def __init__(self, viewmodel: CatalogViewModel, config: AppConfig):
        super().__init__()
        self.setWindowTitle("Bookshelf - Interactive Library")
        self.resize(config.general.window_width, config.general.window_height)

        self.viewmodel = viewmodel
        self.catalog_view = CatalogView()
        self.catalog_view.set_data_context(viewmodel)
        self.setCentralWidget(self.catalog_view)

    def closeEvent(self, event):
        self.viewmodel.deactivate()
        super().closeEvent(event)
