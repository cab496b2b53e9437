"""Parser error types."""


class ParseError(Exception):
    """Raised when UserCSS source cannot be parsed into a record."""


class EmptyInputError(ParseError):
    """The source text is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("source cannot be empty")


class NoDirectivesError(ParseError):
    """The source text contains no line starting with ``@``."""

    def __init__(self) -> None:
        super().__init__("no @-directives found in source")
