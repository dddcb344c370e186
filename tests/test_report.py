"""Tests for xr2kitty.core.report — registry document and JSON output."""

import json

from xr2kitty.core.mapping import resolve_entries
from xr2kitty.core.report import escape_session_name, format_json, format_registry, session_key, sort_entries
from xr2kitty.core.types import NAME_SLOTS, OutputEntry, RGBColor


def _entries() -> list[OutputEntry]:
    return resolve_entries({key: '#804020' for key in NAME_SLOTS})


class TestEscapeSessionName:
    def test_plain(self):
        assert escape_session_name('solarized') == 'solarized'

    def test_space(self):
        assert escape_session_name('My Session') == 'My%20Session'

    def test_slash(self):
        assert escape_session_name('a/b') == 'a%2Fb'

    def test_unreserved_kept(self):
        assert escape_session_name('a-b_c.d~e') == 'a-b_c.d~e'

    def test_path_segment_safe_kept(self):
        assert escape_session_name('$&+:=@') == '$&+:=@'

    def test_reserved_escaped(self):
        assert escape_session_name('a?b;c,d#e%f') == 'a%3Fb%3Bc%2Cd%23e%25f'

    def test_backslash_and_brackets_escaped(self):
        assert escape_session_name('a\\b[c]') == 'a%5Cb%5Bc%5D'

    def test_non_ascii_utf8(self):
        assert escape_session_name('é') == '%C3%A9'

    def test_undecodable_argv_bytes(self):
        # b'caf\xe9' from a non-UTF-8 argv arrives as a surrogate escape
        assert escape_session_name('caf\udce9') == 'caf%E9'

    def test_undecodable_bytes_in_document(self):
        text = format_registry(_entries(), 'caf\udce9')
        assert text.split('\n')[2].endswith('\\Sessions\\caf%E9]')


class TestSortEntries:
    def test_bytewise_not_numeric(self):
        names = [e.name for e in sort_entries(_entries())]
        assert names[:4] == ['Colour0', 'Colour1', 'Colour10', 'Colour11']
        assert names.index('Colour10') < names.index('Colour2')
        assert names[-1] == 'Colour9'

    def test_does_not_mutate(self):
        entries = _entries()
        before = list(entries)
        sort_entries(entries)
        assert entries == before


class TestFormatRegistry:
    def test_header(self):
        lines = format_registry(_entries(), 'work').split('\n')
        assert lines[0] == 'Windows Registry Editor Version 5.00'
        assert lines[1] == ''
        assert lines[2] == '[HKEY_CURRENT_USER\\Software\\9bis.com\\KiTTY\\Sessions\\work]'

    def test_escaped_session_in_path(self):
        text = format_registry(_entries(), 'My Session')
        assert '\\Sessions\\My%20Session]\n' in text

    def test_22_entry_lines(self):
        lines = format_registry(_entries(), 'work').split('\n')
        body = [line for line in lines if line.startswith('"Colour')]
        assert len(body) == 22
        assert body[0] == '"Colour0"="128,64,32"'

    def test_trailing_blank_line(self):
        text = format_registry(_entries(), 'work')
        assert text.endswith('"Colour9"="128,64,32"\n\n')

    def test_total_line_count(self):
        # 3 header lines, 22 entries, 1 blank, then the empty string after the final newline
        assert len(format_registry(_entries(), 'work').split('\n')) == 3 + 22 + 2

    def test_sorted_output(self):
        entries = [
            OutputEntry('Colour2', RGBColor(2, 2, 2)),
            OutputEntry('Colour10', RGBColor(10, 10, 10)),
        ]
        text = format_registry(entries, 's')
        assert text.index('"Colour10"') < text.index('"Colour2"')


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_entries(), 'My Session'))
        assert obj['session'] == 'My Session'
        assert obj['path'] == session_key('My Session')
        assert obj['path'].endswith('\\My%20Session')
        assert len(obj['entries']) == 22

    def test_entry_fields(self):
        obj = json.loads(format_json(_entries(), 's'))
        assert obj['entries'][0] == {'name': 'Colour0', 'r': 128, 'g': 64, 'b': 32, 'hex': '#804020'}

    def test_sorted_like_registry(self):
        obj = json.loads(format_json(_entries(), 's'))
        names = [e['name'] for e in obj['entries']]
        assert names == sorted(names)
