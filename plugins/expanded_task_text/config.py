"""
plugins/expanded_task_text/config.py
Default configuration for the Expanded Task Text plugin.
"""
import os

RESOURCES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "Resources")

DEFAULT_CONFIG = {
    # Bundled reference files (relative to RESOURCES_DIR)
    "quest_info_file": "QuestInfo.json",
    "gunsmith_info_file": "GunsmithInfo.json",
    "config_file": "EttConfig.json",
    # Written back at the end of every run
    "cache_file": "descriptionCache.json",
}

# Used when EttConfig.json leaves a field out
ETT_CONFIG_DEFAULTS = {
    "DisplayAfterLore": False,
}

# Text blocks injected into the quest description
TEXT = {
    "kappa_required": "此任务是 收藏家 的前置任务\n",
    "kappa_not_required": "此任务不是 收藏家 的前置任务\n",
    "lightkeeper_required": "此任务是 Lightkeeper 的前置任务\n",
    "lightkeeper_not_required": "此任务不是 Lightkeeper 的前置任务\n",
    "keys_header": "所需钥匙:",
    "no_keys": "无需钥匙",
    "next_quests_header": "后续任务:",
    "no_next_quests": "无后续任务",
    "gunsmith_durability": "最低耐久度要求: 60",
    "trader_sells": "{trader_name} 可购买 (LL{loyalty_level})",
    "list_entry": "\n\t{name}",
    "list_separator": ", ",
    "block_separator": "\n\n",
}
