# tests/fixtures.py
import unittest
import sys
import os
import json
import shutil
import tempfile
from typing import Any, Dict, List, Optional

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'server' and 'plugins'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from server.database import DatabaseService, LocaleService, LazyLoad
from server.database.models import Quest, QuestCondition, Trader, TraderAssort, AssortItem, Locales
from server.utils.logger import Logger, LogLevel
from plugins.expanded_task_text.models import (
    EnrichmentContext, EttConfig, GunsmithInfo, KeyItem, QuestInfo, QuestObjective
)

# Keep test output quiet
Logger.set_level(LogLevel.CRITICAL + 1)


def make_quest(quest_id: str, prerequisites: Optional[List[str]] = None) -> Quest:
    """A host quest that becomes available once every quest in `prerequisites` is done."""
    conditions = [QuestCondition(condition_type="Quest", target=p) for p in prerequisites or []]
    return Quest(quest_id=quest_id, available_for_start=conditions)


def make_quest_info(quest_id: str, key_groups: Optional[List[List[str]]] = None,
                    kappa: bool = False, lightkeeper: bool = False) -> QuestInfo:
    objectives = []
    if key_groups is not None:
        groups = [[KeyItem(k) for k in group] for group in key_groups]
        objectives.append(QuestObjective(required_keys=groups))
    return QuestInfo(quest_id=quest_id, kappa_required=kappa,
                     lightkeeper_required=lightkeeper, objectives=objectives)


def make_trader(trader_id: str, stock: Dict[str, str], loyalty: Dict[str, int]) -> Trader:
    """stock maps assort instance id -> item template id."""
    items = [AssortItem(item_id=item_id, template=tpl) for item_id, tpl in stock.items()]
    return Trader(trader_id=trader_id, assort=TraderAssort(items=items, loyal_level_items=loyalty))


class EttTestBase(unittest.TestCase):
    """Base class for tests that need an in-memory server database."""

    def setUp(self):
        self.locale: Dict[str, str] = {}
        self.quests: Dict[str, Quest] = {}
        self.traders: Dict[str, Trader] = {}
        self.gunsmith_infos: Dict[str, GunsmithInfo] = {}
        self.config: Optional[EttConfig] = EttConfig(display_after_lore=False)

    def make_context(self, quest_infos: Optional[List[QuestInfo]] = None,
                     cache: Optional[Dict[str, str]] = None) -> EnrichmentContext:
        return EnrichmentContext(
            quest_infos=quest_infos or [],
            gunsmith_infos=self.gunsmith_infos,
            config=self.config,
            locale=self.locale,
            quests=self.quests,
            traders=self.traders,
            description_cache=cache if cache is not None else {},
        )


class ServerTestBase(EttTestBase):
    """
    Adds a full host (database with lazily loaded locales, locale service)
    and a temporary resources directory holding the reference files.
    """

    languages = ["ch", "en"]

    def setUp(self):
        super().setUp()
        self.resources_dir = tempfile.mkdtemp(prefix="ett_resources_")
        self.addCleanup(shutil.rmtree, self.resources_dir, ignore_errors=True)

        # Per-language source tables; the 'ch' table is self.locale
        self.locale_sources: Dict[str, Dict[str, str]] = {lang: {} for lang in self.languages}
        self.locale = self.locale_sources["ch"]
        self.database = self._build_database()
        self.locale_service = LocaleService(self.database, "ch")

    def _build_database(self) -> DatabaseService:
        locales = Locales()
        for language, source in self.locale_sources.items():
            # bind the source per language; copy so transformers don't touch the source
            locales.global_locales[language] = LazyLoad(lambda source=source: dict(source))
        return DatabaseService(quests=self.quests, traders=self.traders, locales=locales)

    def reset_locales(self) -> None:
        """Simulates a server restart: fresh locale tables, same database content."""
        self.database.locales = self._build_database().locales

    def write_resource(self, filename: str, data: Any) -> str:
        path = os.path.join(self.resources_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False)
        return path

    def write_reference_files(self, quest_infos: List[Dict[str, Any]],
                              gunsmith: Optional[Dict[str, Any]] = None,
                              display_after_lore: bool = False) -> None:
        self.write_resource("QuestInfo.json", quest_infos)
        self.write_resource("GunsmithInfo.json", gunsmith or {})
        self.write_resource("EttConfig.json", {"DisplayAfterLore": display_after_lore})

    def read_cache(self) -> Dict[str, str]:
        with open(os.path.join(self.resources_dir, "descriptionCache.json"), 'r', encoding='utf-8') as f:
            return json.load(f)

    def served(self, language: str, key: str) -> Optional[str]:
        """The value a client would receive for a locale key."""
        return self.database.get_locales().global_locales[language].value.get(key)
