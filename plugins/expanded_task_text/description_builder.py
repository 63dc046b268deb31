# plugins/expanded_task_text/description_builder.py
from typing import List, Tuple

from .config import TEXT
from .errors import MissingConfigError
from .models import Diagnostic, EnrichmentContext, QuestInfo
from .resolvers import get_gunsmith_parts_list, get_key_info_for_quest, get_next_quests


def build_new_description(ctx: EnrichmentContext, info: QuestInfo, original_description: str) -> Tuple[str, List[Diagnostic]]:
    """
    Builds the expanded description for one quest.

    Layout, top to bottom: Kappa and Lightkeeper lines, required keys, follow-up
    quests, then gunsmith parts when the quest has a gunsmith entry. The original
    lore goes before all of it when `display_after_lore` is set, after it otherwise.

    Raises MissingConfigError when no configuration was loaded.
    """
    if ctx.config is None:
        raise MissingConfigError()

    diagnostics: List[Diagnostic] = []
    parts: List[str] = []

    if ctx.config.display_after_lore:
        parts.append(original_description)

    parts.append(TEXT["kappa_required"] if info.kappa_required else TEXT["kappa_not_required"])
    parts.append(TEXT["lightkeeper_required"] if info.lightkeeper_required else TEXT["lightkeeper_not_required"])

    key_info, key_diagnostics = get_key_info_for_quest(ctx, info)
    parts.append(key_info)
    parts.append(TEXT["block_separator"])
    diagnostics.extend(key_diagnostics)

    next_quests, next_diagnostics = get_next_quests(ctx, info.quest_id)
    parts.append(next_quests)
    parts.append(TEXT["block_separator"])
    diagnostics.extend(next_diagnostics)

    gunsmith_info = ctx.gunsmith_infos.get(info.quest_id)
    if gunsmith_info is not None:
        parts_list, gunsmith_diagnostics = get_gunsmith_parts_list(ctx, gunsmith_info)
        parts.append(parts_list)
        parts.append(TEXT["block_separator"])
        diagnostics.extend(gunsmith_diagnostics)

    if not ctx.config.display_after_lore:
        parts.append(original_description)

    return "".join(parts), diagnostics
