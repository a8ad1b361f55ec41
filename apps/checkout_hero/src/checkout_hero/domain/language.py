"""Resolution of the stored language preference into a concrete locale tag."""

from __future__ import annotations

SYSTEM_LANGUAGE = "system"
FALLBACK_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "es")


def is_language_supported(language_code: str) -> bool:
    """Return whether the application ships translations for a language."""
    return language_code in SUPPORTED_LANGUAGES


def effective_language(selected: str, system_locale: str) -> str:
    """Return the language code in effect, never ``"system"``."""

    if selected != SYSTEM_LANGUAGE:
        return selected
    language = system_locale.replace("-", "_").split("_", 1)[0].strip()
    return language.lower() or FALLBACK_LANGUAGE


def resolve_display_locale(selected: str, system_locale: str) -> str:
    """Return the locale tag used to format amounts for this preference.

    Following the system keeps its full tag (territory included) so that
    separators match the device; an explicit choice pins the language only.
    """

    if selected == SYSTEM_LANGUAGE:
        return system_locale.strip() or FALLBACK_LANGUAGE
    return selected
