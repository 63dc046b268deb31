# server/database/database_service.py
"""
In-memory game database handed to plugins.
Quests and traders are read eagerly; locale tables are read on first access.
"""
import json
import os
from typing import Dict, Optional

from server.config import (
    QUESTS_FILE, TRADERS_DIR, TRADER_BASE_FILE, TRADER_ASSORT_FILE, GLOBAL_LOCALES_DIR
)
from server.database.lazy_load import LazyLoad
from server.database.models import Quest, Trader, Locales
from server.utils.logger import Logger


def _read_json(path: str):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _locale_loader(path: str):
    def load() -> Dict[str, str]:
        Logger.debug("DatabaseService", f"Loading locale table {path}")
        return _read_json(path)
    return load


class DatabaseService:
    def __init__(self, quests: Optional[Dict[str, Quest]] = None,
                 traders: Optional[Dict[str, Trader]] = None,
                 locales: Optional[Locales] = None):
        self.quests: Dict[str, Quest] = quests if quests is not None else {}
        self.traders: Dict[str, Trader] = traders if traders is not None else {}
        self.locales: Locales = locales if locales is not None else Locales()

    def get_quests(self) -> Dict[str, Quest]:
        return self.quests

    def get_traders(self) -> Dict[str, Trader]:
        return self.traders

    def get_locales(self) -> Locales:
        return self.locales

    @classmethod
    def from_directory(cls, database_dir: str) -> 'DatabaseService':
        """
        Builds the database from an on-disk layout:
            templates/quests.json
            traders/<id>/base.json, traders/<id>/assort.json
            locales/global/<lang>.json
        Missing sections are left empty.
        """
        Logger.info("DatabaseService", f"Loading database from {database_dir}...")

        quests: Dict[str, Quest] = {}
        quests_path = os.path.join(database_dir, QUESTS_FILE)
        if os.path.exists(quests_path):
            for quest_id, quest_data in _read_json(quests_path).items():
                quests[quest_id] = Quest.from_dict(quest_id, quest_data)

        traders: Dict[str, Trader] = {}
        traders_path = os.path.join(database_dir, TRADERS_DIR)
        if os.path.isdir(traders_path):
            for trader_id in sorted(os.listdir(traders_path)):
                trader_dir = os.path.join(traders_path, trader_id)
                base_path = os.path.join(trader_dir, TRADER_BASE_FILE)
                if not os.path.isfile(base_path): continue

                assort_path = os.path.join(trader_dir, TRADER_ASSORT_FILE)
                assort = _read_json(assort_path) if os.path.isfile(assort_path) else None
                traders[trader_id] = Trader.from_dict(trader_id, _read_json(base_path), assort)

        locales = Locales()
        locales_path = os.path.join(database_dir, GLOBAL_LOCALES_DIR)
        if os.path.isdir(locales_path):
            for filename in sorted(os.listdir(locales_path)):
                if not filename.endswith(".json"): continue
                language = filename[:-len(".json")]
                locales.global_locales[language] = LazyLoad(_locale_loader(os.path.join(locales_path, filename)))

        Logger.info("DatabaseService", f"Loaded {len(quests)} quests, {len(traders)} traders, {len(locales.global_locales)} locales.")
        return cls(quests, traders, locales)
