"""
Triangulation Errors

File access problems are reported with the builtin OSError.
"""


class TriangulateError(Exception):
    """Base class of all conversion errors."""


class FormatError(TriangulateError):
    """A vertex or face record could not be parsed."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class NotTriangulatableError(TriangulateError):
    """The source has no vertices or no face with more than 3 corners."""


class DegenerateGeometryError(TriangulateError):
    """A face could not be decomposed into triangles."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line
