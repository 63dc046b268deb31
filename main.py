import argparse
import sys

from server.config import DATABASE_DIR, DESIRED_SERVER_LOCALE, LOG_LEVEL, ABORT_ON_PLUGIN_FAILURE
from server.database import DatabaseService, LocaleService
from server.utils.file_util import FileUtil, JsonUtil
from server.utils.logger import Logger, LogLevel
from plugins.plugin_system import PluginManager

def main() -> int:
    parser = argparse.ArgumentParser(description='Game server plugin host')
    parser.add_argument('--database', '-d', type=str, default=DATABASE_DIR,
                        help='Database directory to load (default: ./database)')
    parser.add_argument('--locale', '-l', type=str, default=DESIRED_SERVER_LOCALE,
                        help=f'Desired server locale (default: {DESIRED_SERVER_LOCALE})')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug output')
    args = parser.parse_args()

    Logger.set_level(LogLevel.DEBUG if args.verbose else LOG_LEVEL)

    database = DatabaseService.from_directory(args.database)
    plugin_manager = PluginManager(
        database=database,
        locale_service=LocaleService(database, args.locale),
        file_util=FileUtil(),
        json_util=JsonUtil(),
    )
    plugin_manager.load_all_plugins()
    results = plugin_manager.run_on_load()

    failed = [plugin_id for plugin_id, result in results.items() if not result.success]
    if failed and ABORT_ON_PLUGIN_FAILURE:
        Logger.critical("Server", f"Startup aborted, plugins failed: {', '.join(failed)}")
        return 1

    Logger.info("Server", f"Started with {len(results) - len(failed)} of {len(results)} plugins.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
