"""Exceptions raised inside the grade tracker."""


class GradeTrackerError(Exception):
    """Base class for all grade tracker exceptions."""


class NameValidationError(GradeTrackerError):
    """The student name is empty or whitespace-only."""


class GradeParseError(GradeTrackerError):
    """The grades text holds a token that is not an integer."""

    def __init__(self, token: str):
        super().__init__(f"Invalid grade value: {token!r}")
        self.token = token
