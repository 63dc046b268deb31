# plugins/expanded_task_text/resolvers.py
"""
Cross-reference lookups used to build the expanded description.
Each resolver returns its text together with the diagnostics it produced;
nothing here logs.
"""
from typing import Dict, List, Tuple

from .config import TEXT
from .models import Diagnostic, EnrichmentContext, GunsmithInfo, QuestInfo


def get_locale(ctx: EnrichmentContext, key: str, diagnostics: List[Diagnostic]) -> str:
    """Looks up a key in the desired locale. A miss is reported and gives ''."""
    value = ctx.locale.get(key)
    if value is None:
        diagnostics.append(Diagnostic.error(f"Could not find locale for `{key}`"))
        return ""
    return value


def _format_list(header: str, names: List[str]) -> str:
    entries = [TEXT["list_entry"].format(name=name) for name in names]
    return header + TEXT["list_separator"].join(entries)


def get_key_info_for_quest(ctx: EnrichmentContext, info: QuestInfo) -> Tuple[str, List[Diagnostic]]:
    diagnostics: List[Diagnostic] = []
    # dict as an ordered set: first-seen order, keyed by display name
    key_names: Dict[str, None] = {}

    for objective in info.objectives:
        if objective.required_keys is None:
            continue

        for group in objective.required_keys:
            if group is None:
                continue

            for key in group:
                key_name = get_locale(ctx, f"{key.key_id} Name", diagnostics)
                if not key_name or key_name in key_names:
                    continue
                key_names[key_name] = None

    if not key_names:
        return TEXT["no_keys"], diagnostics
    return _format_list(TEXT["keys_header"], list(key_names)), diagnostics


def get_next_quests(ctx: EnrichmentContext, current_quest_id: str) -> Tuple[str, List[Diagnostic]]:
    diagnostics: List[Diagnostic] = []
    names: List[str] = []

    for quest_id, quest in ctx.quests.items():
        if quest.available_for_start is None:
            continue

        for condition in quest.available_for_start:
            if condition.target_item is None:
                continue

            if condition.condition_type == "Quest" and condition.target_item == current_quest_id:
                next_quest_name = get_locale(ctx, f"{quest_id} name", diagnostics)
                if next_quest_name:
                    names.append(next_quest_name)

    if not names:
        return TEXT["no_next_quests"], diagnostics
    return _format_list(TEXT["next_quests_header"], names), diagnostics


def get_gunsmith_parts_list(ctx: EnrichmentContext, info: GunsmithInfo) -> Tuple[str, List[Diagnostic]]:
    diagnostics: List[Diagnostic] = []
    lines = [TEXT["gunsmith_durability"]]

    for part_id in info.required_parts:
        lines.append(f"\n{get_locale(ctx, f'{part_id} Name', diagnostics)}")

        for trader_id, trader in ctx.traders.items():
            assort = trader.assort if trader else None
            if assort is None or assort.items is None or assort.loyal_level_items is None:
                continue

            for item in assort.items:
                if item.template != part_id:
                    continue

                loyalty_level = assort.loyal_level_items.get(item.item_id)
                if loyalty_level is None:
                    continue

                trader_name = get_locale(ctx, f"{trader_id} Nickname", diagnostics)
                lines.append("\n\t" + TEXT["trader_sells"].format(trader_name=trader_name, loyalty_level=loyalty_level))

    return "".join(lines), diagnostics
