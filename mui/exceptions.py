"""Domain-specific exceptions."""

from __future__ import annotations

import os


class CatalogError(Exception):
    def __init__(self, message: str, path: str | os.PathLike[str]) -> None:
        super().__init__(f"{message}: {os.fspath(path)}")
        self.path = os.fspath(path)


class CatalogDirectoryNotFound(CatalogError):
    pass


class EmptyCatalogError(CatalogError):
    pass


class LocaleFileError(CatalogError):
    pass
