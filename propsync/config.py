"""
Configuration for property file synchronization
"""

from typing import NamedTuple

# Text encoding for every file read or written
ENCODING = "utf-8"

# Candidate translation files look like messages_<locale>.properties
FILE_PREFIX = "messages_"
FILE_SUFFIX = ".properties"

DEFAULT_BASE_FILENAME = "messages_en_GB.properties"

COMMENT_PREFIX = "#"

# Marker emitted before each run of untranslated keys
TODO_MARKER = (
    "#" * 26,
    "###  TODO: Translate   ###",
    "#" * 26,
)

# Environment variable read by the CLI for log verbosity
LOG_LEVEL_ENV = "PROPSYNC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
# Optional file that receives a copy of the log
LOG_FILE_ENV = "PROPSYNC_LOG_FILE"


class SyncConfig(NamedTuple):
    """Everything one synchronization run needs to know about its files."""
    directory: str
    base_filename: str = DEFAULT_BASE_FILENAME
    prefix: str = FILE_PREFIX
    suffix: str = FILE_SUFFIX
    encoding: str = ENCODING

    def is_candidate(self, filename: str) -> bool:
        """True for translation files, never for the base file itself."""
        return (
            filename.startswith(self.prefix)
            and filename.endswith(self.suffix)
            and filename != self.base_filename
        )
