"""
ViewModel base class.
"""
from typing import Optional
from PySide6.QtCore import QObject

from bookshelf.ui.mvvm.bindable import BindableBase


class BaseViewModel(BindableBase):
    """
    Base class for ViewModels.

    Subclasses declare BindableProperty descriptors plus the matching Qt
    signals, and expose commands as plain methods.
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
