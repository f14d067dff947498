"""
Bookshelf UI.

Provides:
- mvvm: Bindable properties and ViewModel base
- catalog: Catalog view, its ViewModel and pure controllers
"""
