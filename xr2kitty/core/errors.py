"""Error types for xr2kitty. Every failure the CLI reports is a ConversionError."""


class ConversionError(Exception):
    """Base class for all errors that end a run with `Error: <message>`."""


class UsageError(ConversionError):
    pass


class EmptySessionNameError(ConversionError):
    def __init__(self) -> None:
        super().__init__('session name is empty')


class FileOpenError(ConversionError):
    def __init__(self, path: str, reason: object):
        self.path = path
        super().__init__(f"can't open file \"{path}\": {reason}")


class FileReadError(ConversionError):
    def __init__(self, path: str, reason: object):
        self.path = path
        super().__init__(f"can't read file \"{path}\": {reason}")


class NoColoursFoundError(ConversionError):
    def __init__(self, source: str = '<input>'):
        self.source = source
        super().__init__(f'file "{source}" format is invalid: no color codes found')


class MalformedMatchError(ConversionError):
    def __init__(self, index: int, groups: tuple):
        self.index = index
        super().__init__(f'no color code format found in mapping submatch at position {index}: mappings: {groups!r}')


class MissingKeysError(ConversionError):
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"the following keys weren't found in the config file: {', '.join(self.missing)}")


class InvalidFormatError(ConversionError):
    """Raised by the colour decoder for anything that is not #RGB or #RRGGBB."""

    def __init__(self) -> None:
        super().__init__('invalid format')


class InvalidHexError(ConversionError):
    def __init__(self, hex_value: str, reason: object):
        self.hex_value = hex_value
        super().__init__(f'unable to parse hex color "{hex_value}": {reason}')


class PreviewError(ConversionError):
    def __init__(self, path: str, reason: object):
        self.path = path
        super().__init__(f"can't write preview \"{path}\": {reason}")
