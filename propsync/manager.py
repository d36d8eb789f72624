#!/usr/bin/env python3
"""
propsync - .properties localization manager

Usage:
    propsync sync  [directory] [base_file]   # Sync all translation files with the base file
    propsync check [directory] [base_file]   # Report missing, extra and duplicate keys
    propsync clean [directory] [base_file]   # Remove duplicate keys from translation files
    propsync stats [directory] [base_file]   # Show key and word counts per file

directory defaults to the current directory, base_file to messages_en_GB.properties.
PROPSYNC_LOG_LEVEL sets log verbosity, PROPSYNC_LOG_FILE copies the log to a file.
"""

import os
import sys
from typing import List, Optional

from propsync.config import DEFAULT_BASE_FILENAME, DEFAULT_LOG_LEVEL, LOG_FILE_ENV, LOG_LEVEL_ENV, SyncConfig
from propsync.logger import get_logger, setup_logging
from propsync.processor import FileSetProcessor

logger = get_logger("manager")


class LocalizationManager:
    def __init__(self, config: SyncConfig):
        self.config = config
        self.processor = FileSetProcessor(config)

    def _banner(self, title: str) -> None:
        print("\n" + "=" * 80)
        print(title)
        print("=" * 80)

    def sync_with_base(self) -> bool:
        """Sync all translation files with the base file"""
        self._banner(f"SYNCING WITH {self.config.base_filename}")

        report = self.processor.process()

        for filename in report.updated:
            print(f"📝 {filename:40} - Updated")
        for filename in report.unchanged:
            print(f"✅ {filename:40} - Already in sync")
        for filename in report.skipped:
            print(f"⚠️  {filename:40} - SKIPPED (not {self.config.encoding})")

        print(f"\n✨ {report.total} files processed, {len(report.updated)} updated")
        return True

    def check_all_files(self) -> bool:
        """Check all translation files for issues"""
        self._banner("LOCALIZATION FILE CHECK")

        results = self.processor.check()
        for result in results:
            if result.undecodable:
                print(f"❌ {result.filename:40} - NOT {self.config.encoding}")
                continue

            if result.ok:
                print(f"✅ {result.filename:40} - {result.key_count} keys")
                continue

            print(f"⚠️  {result.filename:40} - {result.key_count} keys", end="")
            if result.missing:
                print(f" (missing: {len(result.missing)})", end="")
            if result.extra:
                print(f" (extra: {len(result.extra)})", end="")
            if result.duplicates:
                print(f" (duplicates: {len(result.duplicates)})", end="")
            print()

            for key in result.missing[:5]:
                print(f"      - missing: {key}")
            if len(result.missing) > 5:
                print(f"      ... and {len(result.missing) - 5} more")

        all_ok = all(result.ok for result in results)
        if all_ok:
            print("\n✨ ALL TRANSLATION FILES ARE IN SYNC!")
        else:
            print("\n⚠️ SOME ISSUES FOUND - run 'propsync sync' to fix missing keys")
        return all_ok

    def remove_duplicates(self) -> bool:
        """Remove duplicate keys from all translation files"""
        self._banner("REMOVING DUPLICATE KEYS")

        for filename, count in self.processor.remove_duplicates().items():
            if count:
                print(f"  {filename:40} - Removed {count} duplicates")
            else:
                print(f"  {filename:40} - No duplicates")
        return True

    def show_statistics(self) -> bool:
        """Show localization statistics"""
        self._banner("LOCALIZATION STATISTICS")

        stats = self.processor.statistics()
        if not stats:
            return True

        base_keys = stats[0]['keys'] if stats[0]['file'] == self.config.base_filename else None

        print(f"\n{'File':<40} {'Keys':<12} {'Words':<10}")
        print("-" * 64)
        for stat in stats:
            status = "✅" if stat['keys'] == base_keys else f"⚠️ ({stat['keys']})"
            print(f"{stat['file']:<40} {status:<12} {stat['words']:<10}")
        return True


COMMANDS = {
    'sync': LocalizationManager.sync_with_base,
    'check': LocalizationManager.check_all_files,
    'clean': LocalizationManager.remove_duplicates,
    'stats': LocalizationManager.show_statistics,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point"""
    args = sys.argv[1:] if argv is None else argv

    setup_logging(
        os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        log_file=os.environ.get(LOG_FILE_ENV) or None,
    )

    if not args or len(args) > 3:
        print(__doc__)
        sys.exit(1)

    command = args[0].lower()
    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    directory = args[1] if len(args) > 1 else os.getcwd()
    base_filename = args[2] if len(args) > 2 else DEFAULT_BASE_FILENAME

    manager = LocalizationManager(SyncConfig(directory, base_filename))
    try:
        success = COMMANDS[command](manager)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s failed: %s", command, e)
        print(f"❌ {command} failed: {e}")
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
