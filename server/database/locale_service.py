# server/database/locale_service.py
from typing import Dict

from server.config import DESIRED_SERVER_LOCALE, FALLBACK_LOCALE
from server.database.database_service import DatabaseService
from server.utils.logger import Logger


class LocaleService:
    def __init__(self, database: DatabaseService, desired_locale: str = DESIRED_SERVER_LOCALE):
        self.database = database
        self.desired_locale = desired_locale

    def get_desired_server_locale(self) -> str:
        return self.desired_locale

    def get_locale_db(self, language: str = None) -> Dict[str, str]:
        """
        Returns the resolved key/value table for a language, falling back to
        the fallback locale (or an empty table) when it does not exist.
        """
        language = language or self.desired_locale
        global_locales = self.database.get_locales().global_locales

        locale = global_locales.get(language)
        if locale is None:
            Logger.warning("LocaleService", f"Locale '{language}' not found, falling back to '{FALLBACK_LOCALE}'.")
            locale = global_locales.get(FALLBACK_LOCALE)
        if locale is None:
            Logger.error("LocaleService", f"Fallback locale '{FALLBACK_LOCALE}' not found.")
            return {}

        return locale.value
