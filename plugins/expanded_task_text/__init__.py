"""
plugins/expanded_task_text/__init__.py
Expanded Task Text plugin.
Adds Kappa/Lightkeeper requirements, required keys, follow-up quests and
gunsmith part sources to every quest description at server startup.
"""
import time
from typing import Dict, Optional

from plugins.plugin_system import PluginBase, LoadResult
from server.database import DatabaseService, LocaleService
from server.utils.file_util import FileUtil, JsonUtil
from server.utils.logger import Logger

from .applicator import update_all_task_text
from .config import RESOURCES_DIR
from .errors import ExpandedTaskTextError
from .loader import load_description_cache, load_reference_data, save_description_cache
from .metadata import ETT_METADATA, LOG_SOURCE
from .models import EnrichmentContext

class ExpandedTaskTextPlugin(PluginBase):
    plugin_id = "expanded_task_text"
    plugin_name = ETT_METADATA.name
    # Load after everything so all custom quests exist
    load_priority = 2 ** 31 - 1
    metadata = ETT_METADATA

    def __init__(self, database: DatabaseService = None, locale_service: LocaleService = None,
                 file_util: FileUtil = None, json_util: JsonUtil = None,
                 resources_dir: str = RESOURCES_DIR):
        self.database = database
        self.locale_service = locale_service
        self.file_util = file_util or FileUtil()
        self.json_util = json_util or JsonUtil()
        self.resources_dir = resources_dir

        # Populated by on_load
        self.description_cache: Dict[str, str] = {}
        self.context: Optional[EnrichmentContext] = None

    def on_load(self) -> LoadResult:
        start = time.perf_counter()
        try:
            self._run()
        except ExpandedTaskTextError as e:
            Logger.critical(LOG_SOURCE, str(e))
            return LoadResult(success=False, error=e)

        Logger.success(LOG_SOURCE, f"Completed loading in {time.perf_counter() - start:.2f} seconds.")
        return LoadResult(success=True)

    def _run(self) -> None:
        cache, first_run = load_description_cache(self.resources_dir, self.file_util, self.json_util)
        if first_run:
            Logger.info(LOG_SOURCE, "First time loading, subsequent loading times will be significantly lower. Please wait...")
        else:
            Logger.info(LOG_SOURCE, "loading please wait...")

        reference = load_reference_data(self.resources_dir, self.file_util, self.json_util)

        desired_locale = self.locale_service.get_desired_server_locale()
        self.context = EnrichmentContext(
            quest_infos=reference.quest_infos,
            gunsmith_infos=reference.gunsmith_infos,
            config=reference.config,
            locale=self.locale_service.get_locale_db(desired_locale),
            quests=self.database.get_quests(),
            traders=self.database.get_traders(),
            description_cache=cache,
        )
        self.description_cache = cache

        diagnostics = update_all_task_text(self.context, self.database.get_locales().global_locales)
        for diagnostic in diagnostics:
            Logger.log(diagnostic.level, LOG_SOURCE, diagnostic.message)

        save_description_cache(self.resources_dir, cache, self.file_util, self.json_util)
