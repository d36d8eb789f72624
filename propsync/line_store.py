"""
Read and write files as ordered lists of raw lines
"""

from typing import Iterable, List

from propsync.config import ENCODING
from propsync.logger import get_logger

logger = get_logger("line_store")

BOM = '\ufeff'


def read_raw(file_path: str) -> bytes:
    """Return the file's bytes exactly as they are on disk."""
    with open(file_path, 'rb') as f:
        return f.read()


def decode_lines(data: bytes, encoding: str = ENCODING) -> List[str]:
    """Split file bytes into lines without terminators.

    Decoding is strict: undecodable bytes raise UnicodeDecodeError, which
    callers treat separately from OSError. \\r\\n and \\r count as line
    breaks and a leading byte order mark is dropped.
    """
    content = data.decode(encoding, errors='strict')
    content = content.replace('\r\n', '\n').replace('\r', '\n')
    if content.startswith(BOM):
        content = content[len(BOM):]

    if not content:
        return []

    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return lines


def render_lines(lines: Iterable[str], encoding: str = ENCODING) -> bytes:
    """Encode lines as file content, each one terminated by \\n."""
    return ''.join(line + '\n' for line in lines).encode(encoding)


def read_lines(file_path: str, encoding: str = ENCODING) -> List[str]:
    """Return the file's lines in on-disk order, without line terminators."""
    lines = decode_lines(read_raw(file_path), encoding)
    logger.debug("Read %d lines from %s", len(lines), file_path)
    return lines


def write_lines(file_path: str, lines: Iterable[str], encoding: str = ENCODING) -> None:
    """Replace the whole file with the given lines, one per row."""
    lines = list(lines)
    with open(file_path, 'wb') as f:
        f.write(render_lines(lines, encoding))

    logger.debug("Wrote %d lines to %s", len(lines), file_path)
