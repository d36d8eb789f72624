"""
Synchronize every translation file in a directory with the base file.

Files are handled one at a time. A file that is not valid in the configured
encoding is skipped and left untouched; any OSError aborts the run and is
raised to the caller.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from propsync.config import DEFAULT_BASE_FILENAME, FILE_PREFIX, FILE_SUFFIX, ENCODING, SyncConfig
from propsync.line_store import decode_lines, read_lines, read_raw, render_lines, write_lines
from propsync.logger import get_logger
from propsync.parser import find_duplicate_keys, parse, remove_duplicate_keys
from propsync.synchronizer import extra_keys, missing_keys, sync

logger = get_logger("processor")

UPDATED = "updated"
UNCHANGED = "unchanged"
SKIPPED = "skipped"


@dataclass
class SyncReport:
    """Filenames grouped by what a run did to them."""
    updated: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def record(self, filename: str, status: str) -> None:
        getattr(self, status).append(filename)

    @property
    def total(self) -> int:
        return len(self.updated) + len(self.unchanged) + len(self.skipped)


@dataclass
class FileCheck:
    """Result of comparing one translation file against the base."""
    filename: str
    key_count: int = 0
    missing: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)
    duplicates: Dict[str, List[int]] = field(default_factory=dict)
    undecodable: bool = False

    @property
    def ok(self) -> bool:
        return not (self.missing or self.extra or self.duplicates or self.undecodable)


class FileSetProcessor:
    def __init__(self, config: SyncConfig):
        self.config = config

    @property
    def base_path(self) -> str:
        return os.path.join(self.config.directory, self.config.base_filename)

    def find_candidates(self) -> List[str]:
        """Paths of the translation files directly inside the directory, sorted by name."""
        candidates = []
        for filename in sorted(os.listdir(self.config.directory)):
            if not self.config.is_candidate(filename):
                continue
            file_path = os.path.join(self.config.directory, filename)
            if os.path.isfile(file_path):
                candidates.append(file_path)
        return candidates

    def load_base(self) -> Tuple[Dict[str, str], List[str]]:
        """Read and parse the base file once per run."""
        try:
            base_lines = read_lines(self.base_path, self.config.encoding)
        except UnicodeDecodeError:
            logger.error("Base file %s is not valid %s", self.base_path, self.config.encoding)
            raise

        base_props = parse(base_lines)
        logger.info("Base file %s has %d keys", self.config.base_filename, len(base_props))
        return base_props, base_lines

    def process_file(self, file_path: str, base_props: Dict[str, str],
                     base_lines: List[str]) -> str:
        """Synchronize one translation file and return what happened to it.

        The file is left alone only when its bytes already equal the synced
        content; different line endings or a byte order mark force a rewrite.
        """
        filename = os.path.basename(file_path)

        data = read_raw(file_path)
        try:
            target_lines = decode_lines(data, self.config.encoding)
        except UnicodeDecodeError as e:
            logger.warning("Skipping %s: not valid %s (%s)", filename, self.config.encoding, e.reason)
            return SKIPPED

        target_props = parse(target_lines)
        new_lines = sync(base_props, target_props, base_lines)

        if render_lines(new_lines, self.config.encoding) == data:
            logger.debug("%s already in sync", filename)
            return UNCHANGED

        write_lines(file_path, new_lines, self.config.encoding)
        logger.info(
            "Updated %s (%d missing, %d dropped)",
            filename,
            len(missing_keys(base_props, target_props)),
            len(extra_keys(base_props, target_props)),
        )
        return UPDATED

    def process(self) -> SyncReport:
        """Synchronize every candidate file with the base file."""
        base_props, base_lines = self.load_base()
        report = SyncReport()

        for file_path in self.find_candidates():
            status = self.process_file(file_path, base_props, base_lines)
            report.record(os.path.basename(file_path), status)

        logger.info(
            "Processed %d files: %d updated, %d unchanged, %d skipped",
            report.total, len(report.updated), len(report.unchanged), len(report.skipped),
        )
        return report

    def check(self) -> List[FileCheck]:
        """Compare every candidate with the base without writing anything."""
        base_props, _ = self.load_base()
        results = []

        for file_path in self.find_candidates():
            result = FileCheck(os.path.basename(file_path))
            try:
                lines = read_lines(file_path, self.config.encoding)
            except UnicodeDecodeError:
                logger.warning("Cannot check %s: not valid %s", result.filename, self.config.encoding)
                result.undecodable = True
                results.append(result)
                continue

            props = parse(lines)
            result.key_count = len(props)
            result.missing = missing_keys(base_props, props)
            result.extra = extra_keys(base_props, props)
            result.duplicates = find_duplicate_keys(lines)
            results.append(result)

        return results

    def remove_duplicates(self) -> Dict[str, int]:
        """Keep only the first declaration of each key in every candidate file."""
        removed = {}
        for file_path in self.find_candidates():
            filename = os.path.basename(file_path)
            try:
                lines = read_lines(file_path, self.config.encoding)
            except UnicodeDecodeError:
                logger.warning("Skipping %s: not valid %s", filename, self.config.encoding)
                continue

            new_lines = remove_duplicate_keys(lines)
            removed[filename] = len(lines) - len(new_lines)
            if removed[filename]:
                write_lines(file_path, new_lines, self.config.encoding)
                logger.info("Removed %d duplicate keys from %s", removed[filename], filename)

        return removed

    def statistics(self) -> List[Dict[str, object]]:
        """Key and word counts for the base file followed by every candidate."""
        stats = []
        for file_path in [self.base_path] + self.find_candidates():
            try:
                props = parse(read_lines(file_path, self.config.encoding))
            except UnicodeDecodeError:
                logger.warning("Skipping %s: not valid %s", file_path, self.config.encoding)
                continue

            stats.append({
                'file': os.path.basename(file_path),
                'keys': len(props),
                'words': sum(len(value.split()) for value in props.values()),
            })
        return stats


def process_files(directory: str, base_filename: str = DEFAULT_BASE_FILENAME,
                  prefix: str = FILE_PREFIX, suffix: str = FILE_SUFFIX,
                  encoding: str = ENCODING) -> SyncReport:
    """Synchronize all translation files in directory with base_filename."""
    config = SyncConfig(directory, base_filename, prefix, suffix, encoding)
    return FileSetProcessor(config).process()
