"""Application entrypoint."""

from __future__ import annotations

from mui.catalog import LocalizationCatalog
from mui.config import get_settings
from mui.logging import configure_logging, logger


def main() -> LocalizationCatalog:
    settings = get_settings()
    configure_logging(settings)

    catalog = LocalizationCatalog(
        settings.locales_path,
        enable_logging=settings.enable_logging,
    )
    logger.info(
        "catalog_ready",
        directory=str(catalog.directory),
        locales=list(catalog.locales()),
        default_locale=settings.default_locale,
        default_locale_loaded=catalog.has_locale(settings.default_locale),
    )
    for locale in catalog.locales():
        logger.info(
            "sample_lookup",
            key=settings.sample_key,
            locale=locale,
            own_value=catalog.get(settings.sample_key, locale),
            value=catalog.get_or_default(settings.sample_key, locale, settings.default_locale),
        )
    return catalog


if __name__ == "__main__":
    main()
