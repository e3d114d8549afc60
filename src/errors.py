"""Exceptions raised by the plagiarism checker."""


class PlagiarismCheckError(Exception):
    """Base class for checker errors."""


class InputTooLargeError(PlagiarismCheckError, ValueError):
    """
    Raised when an input exceeds a configured size limit.

    Attributes:
        what (str): Which limit was exceeded ('bytes', 'tokens' or 'lexeme')
        limit (int): The configured maximum
        actual (int): The observed size (at least limit + 1)
    """

    def __init__(self, what, limit, actual):
        self.what = what
        self.limit = limit
        self.actual = actual
        super().__init__(f"Input too large: {actual} {what} exceeds limit of {limit}")
