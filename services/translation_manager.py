# -*- coding: utf-8 -*-
"""
Message catalogue lookup.

French is the reference language: every key exists there, and a key
missing from another catalogue falls back to its French text. Unknown keys
are returned unchanged so a missing entry never breaks a screen.
"""

from typing import Dict
from utils.logger import get_logger

logger = get_logger(__name__)

REFERENCE_LANGUAGE = "fr"


class TranslationManager:
    """Singleton holding the active language and its catalogue."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._catalogues = cls._load_catalogues()
            instance._current_language = REFERENCE_LANGUAGE
            cls._instance = instance

            from app.config import Config
            instance.set_language(Config.DEFAULT_LANGUAGE)
        return cls._instance

    @staticmethod
    def _load_catalogues() -> Dict[str, Dict[str, str]]:
        from services.translations.fr import FR_TRANSLATIONS
        from services.translations.en import EN_TRANSLATIONS
        return {
            "fr": FR_TRANSLATIONS,
            "en": EN_TRANSLATIONS,
        }

    def set_language(self, lang_code: str):
        if lang_code not in self._catalogues:
            logger.warning(f"Unsupported language '{lang_code}', using '{REFERENCE_LANGUAGE}'")
            lang_code = REFERENCE_LANGUAGE
        if self._current_language == lang_code:
            return
        self._current_language = lang_code
        logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        text = self._catalogues[self._current_language].get(key)
        if text is None:
            text = self._catalogues[REFERENCE_LANGUAGE].get(key, key)
        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.debug(f"Bad placeholders for '{key}': {sorted(kwargs)}")
            return text


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
