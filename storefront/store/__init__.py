"""Store pages: layout, landing, catalog and contact."""
from .contact import ContactViewModel
from .landing import StorePageViewModel
from .layout import NavLink, StoreLayoutViewModel, load_store
from .products import ProductDetailViewModel, ProductListViewModel

__all__ = [
    "ContactViewModel",
    "NavLink",
    "ProductDetailViewModel",
    "ProductListViewModel",
    "StoreLayoutViewModel",
    "StorePageViewModel",
    "load_store",
]
