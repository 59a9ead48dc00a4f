"""Errors raised by the Life engine."""


class ConfigurationParseError(ValueError):
    """Configuration text contained a character that is not a known marker.

    Attributes:
        char: The offending character
        row: Row at which it was found
        col: Column at which it was found
    """

    def __init__(self, char: str, row: int, col: int):
        super().__init__(f"Invalid char {char!r} at {row}, {col}")
        self.char = char
        self.row = row
        self.col = col
