# server/database/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Union

from server.database.lazy_load import LazyLoad

@dataclass
class QuestCondition:
    condition_type: str  # e.g., "Quest", "Level", "TraderLoyalty"
    target: Optional[Union[str, List[str]]] = None

    @property
    def target_item(self) -> Optional[str]:
        """The single target id, or None when the target is absent or a list."""
        return self.target if isinstance(self.target, str) else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestCondition':
        return cls(
            condition_type=data.get("conditionType", ""),
            target=data.get("target")
        )

@dataclass
class Quest:
    quest_id: str
    # None when the quest has no AvailableForStart block at all
    available_for_start: Optional[List[QuestCondition]] = None

    @classmethod
    def from_dict(cls, quest_id: str, data: Dict[str, Any]) -> 'Quest':
        conditions = data.get("conditions") or {}
        raw_start = conditions.get("AvailableForStart")
        available_for_start = None
        if raw_start is not None:
            available_for_start = [QuestCondition.from_dict(c) for c in raw_start if isinstance(c, dict)]

        return cls(
            quest_id=data.get("_id", quest_id),
            available_for_start=available_for_start
        )

@dataclass
class AssortItem:
    item_id: str    # instance id, key into loyal_level_items
    template: str   # item template id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssortItem':
        return cls(
            item_id=data["_id"],
            template=data["_tpl"]
        )

@dataclass
class TraderAssort:
    items: Optional[List[AssortItem]] = None
    loyal_level_items: Optional[Dict[str, int]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TraderAssort':
        raw_items = data.get("items")
        raw_levels = data.get("loyal_level_items")
        return cls(
            items=[AssortItem.from_dict(i) for i in raw_items] if raw_items is not None else None,
            loyal_level_items={k: int(v) for k, v in raw_levels.items()} if raw_levels is not None else None
        )

@dataclass
class Trader:
    trader_id: str
    assort: Optional[TraderAssort] = None

    @classmethod
    def from_dict(cls, trader_id: str, base: Dict[str, Any], assort: Optional[Dict[str, Any]] = None) -> 'Trader':
        return cls(
            trader_id=base.get("_id", trader_id),
            assort=TraderAssort.from_dict(assort) if assort is not None else None
        )

@dataclass
class Locales:
    # language -> lazily loaded key/value string table
    global_locales: Dict[str, LazyLoad[Dict[str, str]]] = field(default_factory=dict)
