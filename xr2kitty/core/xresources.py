"""Regex-based extractor for X resources colour assignments.

Recognises lines such as `*.color4: #268bd2` or `URxvt*.foreground: #eee8d5`.
Only the 19 terminal colour keys are matched and only 6-digit hex values.
Does NOT attempt to parse X resources syntax (includes, #define, classes).
"""

import re

from xr2kitty.core.errors import MalformedMatchError, NoColoursFoundError

COLOUR_LINE = re.compile(r'\*\.(color[0-9]{1,2}|foreground|background|cursorColor): +(#[a-fA-F0-9]{6})')


def extract_assignments(text: str, source: str = '<input>') -> dict[str, str]:
    """Return {key: '#rrggbb'} for every colour assignment in text.

    Later assignments of the same key replace earlier ones.
    """
    values: dict[str, str] = {}
    matched = False
    for idx, m in enumerate(COLOUR_LINE.finditer(text)):
        matched = True
        groups = m.groups()
        if len(groups) != 2:
            raise MalformedMatchError(idx, groups)
        key, hex_value = groups
        values[key] = hex_value

    if not matched:
        raise NoColoursFoundError(source)
    return values
