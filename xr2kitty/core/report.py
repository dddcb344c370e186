"""Report builder — KiTTY registry document and JSON output for xr2kitty."""

import json
import os
from typing import Any
from urllib.parse import quote

from xr2kitty.core.types import REGISTRY_HEADER, SESSIONS_PATH, OutputEntry

# Characters left as-is in a URL path segment besides the unreserved set.
_PATH_SEGMENT_SAFE = '$&+:=@'


def escape_session_name(session_name: str) -> str:
    """Percent-escape a session name as a single URL path segment ('My Session' -> 'My%20Session').

    Escapes the filesystem-encoded bytes, so argv bytes that are not valid
    UTF-8 come out as their own %XX escapes.
    """
    return quote(os.fsencode(session_name), safe=_PATH_SEGMENT_SAFE)


def session_key(session_name: str) -> str:
    """Full registry key path for a session, without brackets."""
    return SESSIONS_PATH + escape_session_name(session_name)


def sort_entries(entries: list[OutputEntry]) -> list[OutputEntry]:
    """Sort by name as plain strings: 'Colour10' comes before 'Colour2'."""
    return sorted(entries, key=lambda e: e.name)


def format_registry(entries: list[OutputEntry], session_name: str) -> str:
    """Format entries as a .reg document, ending with a blank line."""
    lines = [
        REGISTRY_HEADER,
        '',
        f'[{session_key(session_name)}]',
    ]
    for entry in sort_entries(entries):
        lines.append(f'"{entry.name}"="{entry.color.rgb_string()}"')
    return '\n'.join(lines) + '\n\n'


def format_json(entries: list[OutputEntry], session_name: str) -> str:
    """Format the resolved palette as JSON."""
    obj: dict[str, Any] = {
        'session': session_name,
        'path': session_key(session_name),
    }
    obj['entries'] = [
        {
            'name': entry.name,
            'r': entry.color.r,
            'g': entry.color.g,
            'b': entry.color.b,
            'hex': entry.color.hex,
        }
        for entry in sort_entries(entries)
    ]
    return json.dumps(obj, indent=2)
