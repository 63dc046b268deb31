# server/config/config_server.py
"""
Configuration for the server host: file paths, locale selection and logging.
"""
import os

from server.utils.logger import LogLevel

# --- Directories and Files ---
# config_server.py is in server/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATABASE_DIR = os.path.join(BASE_DIR, "database")
PLUGIN_DIR = os.path.join(BASE_DIR, "plugins")

# Database layout (relative to DATABASE_DIR)
QUESTS_FILE = os.path.join("templates", "quests.json")
TRADERS_DIR = "traders"
TRADER_BASE_FILE = "base.json"
TRADER_ASSORT_FILE = "assort.json"
GLOBAL_LOCALES_DIR = os.path.join("locales", "global")

# --- Locale Settings ---
DESIRED_SERVER_LOCALE = "ch"
FALLBACK_LOCALE = "en"

# --- Logging ---
LOG_LEVEL = LogLevel.INFO

# --- Plugin Loading ---
# A plugin reporting failure stops startup when this is set.
ABORT_ON_PLUGIN_FAILURE = True
