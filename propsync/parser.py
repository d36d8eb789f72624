"""
Parse .properties lines into keys and values.

Every raw line falls into exactly one of four kinds:

    Blank         - nothing but whitespace
    Comment       - starts with '#' (after trimming)
    Assignment    - a 'key=value' declaration split on the first '='
    Unrecognized  - any other text, e.g. a line with no '='

A '#' prefix always wins, so '#a=b' is a comment. Unrecognized lines never
raise and never reach the key map; like comments and blank lines they are
kept as structure.
"""

from collections import OrderedDict, defaultdict
from typing import Dict, Iterable, List, NamedTuple, Union

from propsync.config import COMMENT_PREFIX


class Comment(NamedTuple):
    text: str


class Blank(NamedTuple):
    text: str


class Assignment(NamedTuple):
    key: str
    value: str


class Unrecognized(NamedTuple):
    text: str


ClassifiedLine = Union[Comment, Blank, Assignment, Unrecognized]


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single raw line. Pure and total."""
    stripped = line.strip()

    if not stripped:
        return Blank(line)

    if stripped.startswith(COMMENT_PREFIX):
        return Comment(line)

    if '=' in stripped:
        key, _, value = stripped.partition('=')
        return Assignment(key.strip(), value.strip())

    return Unrecognized(line)


def parse(lines: Iterable[str]) -> Dict[str, str]:
    """Build a key -> value map from raw lines. Later duplicates win."""
    props = OrderedDict()
    for line in lines:
        classified = classify_line(line)
        if isinstance(classified, Assignment):
            props[classified.key] = classified.value
    return props


def find_duplicate_keys(lines: Iterable[str]) -> Dict[str, List[int]]:
    """Return keys declared more than once, with their 1-based line numbers."""
    seen = defaultdict(list)
    for line_num, line in enumerate(lines, 1):
        classified = classify_line(line)
        if isinstance(classified, Assignment):
            seen[classified.key].append(line_num)

    return OrderedDict(
        (key, line_nums) for key, line_nums in seen.items() if len(line_nums) > 1
    )


def remove_duplicate_keys(lines: Iterable[str]) -> List[str]:
    """Drop repeated declarations of a key, keeping the first occurrence."""
    seen_keys = set()
    new_lines = []

    for line in lines:
        classified = classify_line(line)
        if isinstance(classified, Assignment):
            if classified.key in seen_keys:
                continue
            seen_keys.add(classified.key)
        new_lines.append(line)

    return new_lines
