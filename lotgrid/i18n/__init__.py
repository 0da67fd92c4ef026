"""Internationalization support for lotgrid.

Wraps Castella's i18n system and loads the lotgrid translation catalogs.

Usage:
    from lotgrid.i18n import init_i18n, t

    init_i18n()  # Auto-detect from OS
    init_i18n("ko")  # or explicit locale

    Button(t("toolbar.add_row"))
    Text(t("status.shown", shown=2, count=3))
"""

import locale
import logging
import os
from pathlib import Path
from typing import Any

from castella.i18n import I18nManager, load_yaml_catalog

logger = logging.getLogger(__name__)

_LOCALES_DIR = Path(__file__).parent / "locales"

SUPPORTED_LOCALES = ["en", "ko"]


def detect_os_locale() -> str:
    """Detect the OS language setting.

    Returns:
        Detected locale code ('en' or 'ko'), defaults to 'en' if not detected
    """
    for env_var in ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE"):
        lang = os.environ.get(env_var, "")
        if lang:
            # "ko_KR.UTF-8" -> "ko"
            lang_code = lang.split("_")[0].split(".")[0].lower()
            if lang_code in SUPPORTED_LOCALES:
                return lang_code

    try:
        system_locale = locale.getlocale()[0]
        if system_locale:
            lang_code = system_locale.split("_")[0].lower()
            if lang_code in SUPPORTED_LOCALES:
                return lang_code
    except (ValueError, TypeError):
        pass

    return "en"


def init_i18n(locale_code: str | None = None) -> None:
    """Load all translation catalogs and set the initial locale.

    Args:
        locale_code: Initial locale code (e.g., 'en', 'ko').
                     If None or 'auto', auto-detect from OS settings.
    """
    manager = I18nManager()

    if _LOCALES_DIR.exists():
        for yaml_file in _LOCALES_DIR.glob("*.yaml"):
            try:
                catalog = load_yaml_catalog(yaml_file)
                manager.load_catalog(catalog.locale, catalog)
            except Exception as e:
                logger.warning(f"Failed to load locale {yaml_file}: {e}")

    if locale_code is None or locale_code == "auto":
        locale_code = detect_os_locale()

    manager.set_locale(locale_code)


def t(key: str, **kwargs: Any) -> str:
    """Translate a key using the current locale.

    Returns the key itself if no translation is found.
    """
    return I18nManager().t(key, **kwargs)


def get_locale() -> str:
    return I18nManager().locale


def set_locale(locale_code: str) -> None:
    """Switch the UI language; listeners re-render on change."""
    I18nManager().set_locale(locale_code)


def next_locale(current: str) -> str:
    """Locale after current in SUPPORTED_LOCALES, wrapping around."""
    if current not in SUPPORTED_LOCALES:
        return SUPPORTED_LOCALES[0]
    return SUPPORTED_LOCALES[(SUPPORTED_LOCALES.index(current) + 1) % len(SUPPORTED_LOCALES)]


__all__ = [
    "init_i18n",
    "t",
    "get_locale",
    "set_locale",
    "next_locale",
    "detect_os_locale",
    "SUPPORTED_LOCALES",
]
