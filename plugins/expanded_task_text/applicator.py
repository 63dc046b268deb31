# plugins/expanded_task_text/applicator.py
from typing import Callable, Dict, List

from server.database.lazy_load import LazyLoad

from .description_builder import build_new_description
from .models import Diagnostic, EnrichmentContext


def _description_writer(key: str, description: str) -> Callable[[Dict[str, str]], Dict[str, str]]:
    def transform(table: Dict[str, str]) -> Dict[str, str]:
        table[key] = description
        return table
    return transform


def update_all_task_text(ctx: EnrichmentContext, global_locales: Dict[str, LazyLoad[Dict[str, str]]]) -> List[Diagnostic]:
    """
    Writes the expanded description of every known quest into every language.

    Descriptions are built once from the desired server locale and stored in
    `ctx.description_cache`; a quest already in the cache is never rebuilt.
    The same text goes to every language.
    """
    diagnostics: List[Diagnostic] = []

    for info in ctx.quest_infos:
        description_key = f"{info.quest_id} description"
        original_description = ctx.locale.get(description_key)
        if original_description is None:
            diagnostics.append(Diagnostic.error(f"Could not find quest description for `{info.quest_id}`"))
            continue

        if info.quest_id not in ctx.description_cache:
            new_description, build_diagnostics = build_new_description(ctx, info, original_description)
            ctx.description_cache[info.quest_id] = new_description
            diagnostics.extend(build_diagnostics)

        new_description = ctx.description_cache[info.quest_id]
        for locale in global_locales.values():
            locale.add_transformer(_description_writer(description_key, new_description))

    return diagnostics
