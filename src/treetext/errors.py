"""Exception classes for treetext.

Provides standardized exceptions for error handling throughout treetext.
"""

from __future__ import annotations


class TreeTextError(Exception):
    """Base exception for all treetext errors.

    Subclass this for specific error categories.
    """

    pass


class TreeSyntaxError(TreeTextError):
    """Error during tree notation parsing.

    Raised when the parser encounters malformed input. No partial tree is
    ever returned alongside it.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize syntax error with optional location.

        Args:
            message: Error description
            lineno: Line number of the offending token (1-indexed)
            col_offset: Column of the offending token (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class EmptyInputError(TreeTextError):
    """Raised by front ends when there is no text to parse at all."""

    def __init__(self, message: str = "enter a tree representation") -> None:
        self.message = message
        super().__init__(message)
