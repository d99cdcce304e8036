"""Locale catalog backed by a directory of ``.mui`` properties files."""

from mui.catalog import LocalizationCatalog
from mui.exceptions import (
    CatalogDirectoryNotFound,
    CatalogError,
    EmptyCatalogError,
    LocaleFileError,
)

__all__ = [
    "CatalogDirectoryNotFound",
    "CatalogError",
    "EmptyCatalogError",
    "LocaleFileError",
    "LocalizationCatalog",
]
