"""In-memory catalog of ``.mui`` translation tables with locale fallback."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import javaproperties

from mui.exceptions import CatalogDirectoryNotFound, EmptyCatalogError, LocaleFileError
from mui.logging import catalog_logger as default_logger

MUI_EXTENSION = ".mui"


def list_locale_files(directory: Path) -> list[Path]:
    """Return ``.mui`` entries of ``directory`` in filesystem listing order."""

    try:
        names = os.listdir(directory)
    except OSError as exc:
        raise CatalogDirectoryNotFound("Localization directory not found", directory) from exc
    return [directory / name for name in names if name.endswith(MUI_EXTENSION)]


def locale_from_filename(name: str) -> str:
    """Strip the trailing ``.mui`` only; inner dots and case are kept."""

    return name.removesuffix(MUI_EXTENSION)


def read_locale_file(path: Path) -> dict[str, str]:
    """Parse one properties-style file decoded as UTF-8."""

    try:
        with path.open("r", encoding="utf-8") as fp:
            return javaproperties.load(fp)
    except (OSError, ValueError) as exc:
        raise LocaleFileError("Cannot read localization file", path) from exc


class LocalizationCatalog:
    """Translation tables for every locale found in a directory.

    All files are read in the constructor; any failure aborts construction.
    Locale order follows the directory listing and is not sorted. After
    construction nothing is mutated, so concurrent readers need no locking.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        *,
        enable_logging: bool = False,
        logger: Any = None,
    ) -> None:
        self.directory = Path(directory).absolute()
        self._logger = (logger or default_logger) if enable_logging else None
        self._log("debug", "catalog_loading", directory=str(self.directory))

        try:
            files = list_locale_files(self.directory)
        except CatalogDirectoryNotFound:
            self._log("error", "catalog_directory_missing", directory=str(self.directory))
            raise
        if not files:
            self._log("error", "catalog_empty", directory=str(self.directory))
            raise EmptyCatalogError("No localization files found", self.directory)

        tables: dict[str, Mapping[str, str]] = {}
        for path in files:
            locale = locale_from_filename(path.name)
            self._log("debug", "locale_found", locale=locale)
            try:
                table = read_locale_file(path)
            except LocaleFileError as exc:
                self._log("error", "locale_file_unreadable", path=exc.path, error=str(exc.__cause__))
                raise
            # Duplicate identifiers keep their first position; the last table wins.
            tables[locale] = MappingProxyType(table)
            self._log("debug", "locale_loaded", locale=locale, keys=len(table))

        self._tables: Mapping[str, Mapping[str, str]] = MappingProxyType(tables)
        self._locales: tuple[str, ...] = tuple(tables)
        self._log("debug", "catalog_loaded", locales=list(self._locales))

    def locales(self) -> tuple[str, ...]:
        return self._locales

    def get(self, key: str, locale: str) -> str | None:
        """Return the value of ``key`` for ``locale`` or ``None`` on a miss."""

        table = self._tables.get(locale)
        if table is None:
            self._log("warning", "locale_not_found", locale=locale)
            return None
        value = table.get(key)
        if value is None:
            self._log("warning", "translation_key_not_found", key=key, locale=locale)
        return value

    def get_or_default(self, key: str, locale: str, fallback_locale: str) -> str | None:
        """Look ``key`` up in ``locale``, then once in ``fallback_locale``."""

        value = self.get(key, locale)
        if value is not None:
            return value
        return self.get(key, fallback_locale)

    def table(self, locale: str) -> Mapping[str, str] | None:
        return self._tables.get(locale)

    def has_locale(self, locale: str) -> bool:
        return locale in self._tables

    def __contains__(self, locale: object) -> bool:
        return self.has_locale(locale)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocalizationCatalog(directory={str(self.directory)!r}, locales={list(self._locales)!r})"

    def _log(self, level: str, event: str, **kwargs: Any) -> None:
        if self._logger is not None:
            getattr(self._logger, level)(event, **kwargs)


__all__ = ["LocalizationCatalog", "MUI_EXTENSION", "list_locale_files", "locale_from_filename", "read_locale_file"]
