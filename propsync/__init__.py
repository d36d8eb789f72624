"""
propsync - keep translated .properties files in step with a base file
"""

from propsync.config import SyncConfig
from propsync.parser import Assignment, Blank, Comment, Unrecognized, classify_line, parse
from propsync.processor import FileSetProcessor, SyncReport, process_files
from propsync.synchronizer import sync

__version__ = "1.0.0"

__all__ = [
    "Assignment",
    "Blank",
    "Comment",
    "FileSetProcessor",
    "SyncConfig",
    "SyncReport",
    "Unrecognized",
    "classify_line",
    "parse",
    "process_files",
    "sync",
]
