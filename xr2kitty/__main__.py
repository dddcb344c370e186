"""xr2kitty — Convert X resources terminal colours into a KiTTY session .reg file.

Usage: xr2kitty <filename> <sessionName> [options]

Reads foreground, background, cursorColor and color0..color15 from an
X resources file (lines like `*.color4: #268bd2`) and prints a Windows
Registry Editor document for the KiTTY session <sessionName> on stdout.
Redirect it to a file and import it with regedit on the Windows side.

All 19 keys must be present. Missing keys are reported together and
nothing is printed to stdout. Every failure is printed to stderr as
`Error: <message>` and exits 1.
"""

import argparse
import functools
import sys
from collections.abc import Callable

from xr2kitty.core.errors import (
    ConversionError,
    EmptySessionNameError,
    FileOpenError,
    FileReadError,
    UsageError,
)
from xr2kitty.core.mapping import resolve_entries
from xr2kitty.core.report import format_json, format_registry
from xr2kitty.core.types import OutputEntry
from xr2kitty.core.xresources import extract_assignments

USAGE = 'usage: xr2kitty [filename] [sessionName] -- get colors from: http://dotshare.it/category/terms/colors/'

_FLAG_OPTIONS = ('-h', '--help', '-j', '--json', '-v', '--verbose')
_VALUE_OPTIONS = ('-p', '--preview')


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations as UsageError instead of exiting 2."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(USAGE)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  xr2kitty ~/.Xresources solarized > solarized.reg\n'
        '  xr2kitty ~/.Xresources "My Session" --json\n'
        '  xr2kitty ~/.Xresources solarized --preview solarized.png > solarized.reg\n'
        '  xr2kitty ~/.Xresources -dark\n'
    )
    parser = _ArgumentParser(
        prog='xr2kitty',
        description='Convert X resources terminal colours into a KiTTY session .reg file.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument('filename', help='X resources file with *.colorN / *.foreground / ... lines')
    parser.add_argument('session_name', metavar='sessionName', help='KiTTY session name (percent-escaped in the key)')
    parser.add_argument('-j', '--json', action='store_true', help='Output the resolved palette as JSON')
    parser.add_argument('-p', '--preview', metavar='PNG', default=None, help='Also write a PNG swatch of the palette')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print progress to stderr')
    return parser


def _split_argv(argv: list[str]) -> list[str]:
    """Reorder argv as options + ['--'] + positionals.

    Only the exact option spellings above count as options. Every other
    token is positional, even one starting with '-', so
    `xr2kitty colours.Xresources -dark` names a session '-dark'.
    """
    options: list[str] = []
    positionals: list[str] = []
    tokens = iter(argv)
    for tok in tokens:
        if tok == '--':
            positionals.extend(tokens)
        elif tok in _FLAG_OPTIONS or tok.startswith('--preview='):
            options.append(tok)
        elif tok in _VALUE_OPTIONS:
            value = next(tokens, None)
            if value is None:
                raise UsageError(USAGE)
            options.append(f'--preview={value}')
        else:
            positionals.append(tok)
    return options + ['--'] + positionals


def _log(args: argparse.Namespace, message: str) -> None:
    if args.verbose:
        print(f'xr2kitty: {message}', file=sys.stderr)


def _read_text(path: str) -> str:
    """Read the whole input file. The handle is closed on every path."""
    try:
        f = open(path, encoding='utf-8', errors='replace')
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or exc) from exc
    with f:
        try:
            return f.read()
        except OSError as exc:
            raise FileReadError(path, exc.strerror or exc) from exc


def _discard(message: str) -> None:
    pass


def convert(path: str, session_name: str, log: Callable[[str], None] = _discard) -> list[OutputEntry]:
    """Read, extract and resolve: the whole pipeline short of rendering."""
    if not session_name:
        raise EmptySessionNameError()
    text = _read_text(path)
    log(f'read {len(text)} characters from {path}')
    values = extract_assignments(text, source=path)
    log(f'matched {len(values)} colour keys')
    entries = resolve_entries(values)
    log(f'resolved {len(entries)} entries')
    return entries


def _run(argv: list[str] | None) -> str:
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(_split_argv(argv))

    entries = convert(args.filename, args.session_name, log=functools.partial(_log, args))

    if args.preview:
        from xr2kitty.preview import write_swatch

        write_swatch(entries, args.preview)
        _log(args, f'wrote preview {args.preview}')

    if args.json:
        return format_json(entries, args.session_name) + '\n'
    return format_registry(entries, args.session_name)


def main(argv: list[str] | None = None) -> int:
    try:
        output = _run(argv)
    except ConversionError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
