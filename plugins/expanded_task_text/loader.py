# plugins/expanded_task_text/loader.py
import os
from typing import Any, Callable, Dict, Tuple, TypeVar

from server.utils.file_util import FileUtil, JsonUtil

from .config import DEFAULT_CONFIG
from .errors import ExpandedTaskTextError, ReferenceDataError
from .models import QuestInfo, GunsmithInfo, EttConfig, ReferenceData

T = TypeVar("T")


def _load_required(path: str, file_util: FileUtil, json_util: JsonUtil, parse: Callable[[Any], T]) -> T:
    if not file_util.file_exists(path):
        raise ReferenceDataError(path, "file does not exist")
    try:
        data = json_util.deserialize(file_util.read_file(path))
        return parse(data)
    except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
        raise ReferenceDataError(path, f"{type(e).__name__}: {e}") from e


def _parse_quest_infos(data: Any):
    if not isinstance(data, list):
        raise TypeError(f"expected a list of quests, got {type(data).__name__}")
    return [QuestInfo.from_dict(q) for q in data]


def _parse_gunsmith_infos(data: Any) -> Dict[str, GunsmithInfo]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a quest id mapping, got {type(data).__name__}")
    return {quest_id: GunsmithInfo.from_dict(info) for quest_id, info in data.items()}


def _parse_cache(data: Any) -> Dict[str, str]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a quest id mapping, got {type(data).__name__}")
    for quest_id, description in data.items():
        if not isinstance(description, str):
            raise TypeError(f"cached description for `{quest_id}` must be text, got {type(description).__name__}")
    return dict(data)


def load_reference_data(resources_dir: str, file_util: FileUtil, json_util: JsonUtil) -> ReferenceData:
    """
    Reads the three bundled reference files.
    Raises ReferenceDataError if any of them is missing or malformed.
    """
    return ReferenceData(
        quest_infos=_load_required(
            os.path.join(resources_dir, DEFAULT_CONFIG["quest_info_file"]), file_util, json_util, _parse_quest_infos),
        gunsmith_infos=_load_required(
            os.path.join(resources_dir, DEFAULT_CONFIG["gunsmith_info_file"]), file_util, json_util, _parse_gunsmith_infos),
        config=_load_required(
            os.path.join(resources_dir, DEFAULT_CONFIG["config_file"]), file_util, json_util, EttConfig.from_dict),
    )


def get_cache_path(resources_dir: str) -> str:
    return os.path.join(resources_dir, DEFAULT_CONFIG["cache_file"])


def load_description_cache(resources_dir: str, file_util: FileUtil, json_util: JsonUtil) -> Tuple[Dict[str, str], bool]:
    """
    Reads the description cache.
    Returns: (cache, first_run). An absent file gives an empty cache and first_run=True.
    """
    path = get_cache_path(resources_dir)
    if not file_util.file_exists(path):
        return {}, True
    return _load_required(path, file_util, json_util, _parse_cache), False


def save_description_cache(resources_dir: str, cache: Dict[str, str], file_util: FileUtil, json_util: JsonUtil) -> None:
    path = get_cache_path(resources_dir)
    try:
        file_util.write_file(path, json_util.serialize(cache))
    except OSError as e:
        raise ExpandedTaskTextError(f"Failed to write `{path}`: {e}") from e
