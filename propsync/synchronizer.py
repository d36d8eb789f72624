"""
Bring a translation in line with the base file's structure
"""

from typing import Dict, Iterable, List

from propsync.config import TODO_MARKER
from propsync.parser import Assignment, classify_line


def sync(base_props: Dict[str, str], target_props: Dict[str, str],
         base_lines: Iterable[str]) -> List[str]:
    """Return the new lines of a target file.

    The base lines are the template: comments and blank lines are copied,
    each base key takes the target's value when it is translated and the
    base value otherwise. Every contiguous run of untranslated keys is
    preceded by TODO_MARKER. Keys that exist only in the target are
    dropped.
    """
    new_lines = []
    todo_open = False

    for line in base_lines:
        classified = classify_line(line)

        if not isinstance(classified, Assignment):
            new_lines.append(line)
            todo_open = False
            continue

        key = classified.key
        if key in target_props:
            new_lines.append(f"{key}={target_props[key]}")
            todo_open = False
        else:
            if not todo_open:
                new_lines.extend(TODO_MARKER)
                todo_open = True
            new_lines.append(f"{key}={base_props.get(key, classified.value)}")

    return new_lines


def missing_keys(base_props: Dict[str, str], target_props: Dict[str, str]) -> List[str]:
    """Keys the target still has to translate."""
    return sorted(set(base_props) - set(target_props))


def extra_keys(base_props: Dict[str, str], target_props: Dict[str, str]) -> List[str]:
    """Keys the target declares that the base no longer has."""
    return sorted(set(target_props) - set(base_props))
