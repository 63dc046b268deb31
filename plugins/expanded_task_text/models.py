# plugins/expanded_task_text/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

from server.database.models import Quest, Trader
from server.utils.logger import LogLevel

from .config import ETT_CONFIG_DEFAULTS

_MISSING = object()

def _field(data: Dict[str, Any], name: str, default: Any = _MISSING) -> Any:
    """Reads a JSON field by name, ignoring case (`Id`, `id` and `ID` all match)."""
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if key.lower() == lowered:
            return value
    if default is _MISSING:
        raise KeyError(name)
    return default

def _bool_field(data: Dict[str, Any], name: str, default: bool) -> bool:
    value = _field(data, name, default)
    if not isinstance(value, bool):
        raise TypeError(f"`{name}` must be true or false, got {value!r}")
    return value

def _list_field(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise TypeError(f"`{name}` must be a list, got {type(value).__name__}")
    return value

@dataclass(frozen=True)
class KeyItem:
    key_id: str

    @classmethod
    def from_json(cls, data: Any) -> 'KeyItem':
        if isinstance(data, str):
            return cls(key_id=data)
        if not isinstance(data, dict):
            raise TypeError(f"key must be an id or an object, got {type(data).__name__}")
        return cls(key_id=str(_field(data, "Id")))

@dataclass(frozen=True)
class QuestObjective:
    # Alternative key groups; either the whole list or a single group may be None
    required_keys: Optional[List[Optional[List[KeyItem]]]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestObjective':
        raw_groups = _field(data, "RequiredKeys", None)
        if raw_groups is None:
            return cls()
        groups = [
            [KeyItem.from_json(k) for k in _list_field(group, "RequiredKeys group")] if group is not None else None
            for group in _list_field(raw_groups, "RequiredKeys")
        ]
        return cls(required_keys=groups)

@dataclass(frozen=True)
class QuestInfo:
    quest_id: str
    kappa_required: bool = False
    lightkeeper_required: bool = False
    objectives: List[QuestObjective] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestInfo':
        return cls(
            quest_id=str(_field(data, "Id")),
            kappa_required=_bool_field(data, "KappaRequired", False),
            lightkeeper_required=_bool_field(data, "LightkeeperRequired", False),
            objectives=[QuestObjective.from_dict(o) for o in _field(data, "QuestObjectives", None) or []]
        )

@dataclass(frozen=True)
class GunsmithInfo:
    required_parts: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GunsmithInfo':
        return cls(required_parts=[str(p) for p in _field(data, "RequiredParts", None) or []])

@dataclass(frozen=True)
class EttConfig:
    display_after_lore: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EttConfig':
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        return cls(
            display_after_lore=_bool_field(data, "DisplayAfterLore", ETT_CONFIG_DEFAULTS["DisplayAfterLore"])
        )

@dataclass(frozen=True)
class Diagnostic:
    level: int  # a LogLevel value
    message: str

    @classmethod
    def error(cls, message: str) -> 'Diagnostic':
        return cls(LogLevel.ERROR, message)

@dataclass
class ReferenceData:
    quest_infos: List[QuestInfo]
    gunsmith_infos: Dict[str, GunsmithInfo]
    config: Optional[EttConfig]

@dataclass
class EnrichmentContext:
    """Everything one enrichment pass reads, built once at startup."""
    quest_infos: List[QuestInfo]
    gunsmith_infos: Dict[str, GunsmithInfo]
    config: Optional[EttConfig]
    locale: Dict[str, str]          # desired server locale table
    quests: Dict[str, Quest]        # host quest database, iteration order is observable
    traders: Dict[str, Trader]
    description_cache: Dict[str, str] = field(default_factory=dict)
