"""
MVVM Package - Bindable properties for PySide6 ViewModels.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase: QObject base with generic propertyChanged signal.
- BaseViewModel: Base class for ViewModels.
"""
from bookshelf.ui.mvvm.bindable import BindableProperty, BindableBase
from bookshelf.ui.mvvm.viewmodel import BaseViewModel

__all__ = [
    "BaseViewModel",
    "BindableBase",
    "BindableProperty",
]
