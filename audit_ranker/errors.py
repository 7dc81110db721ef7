"""Audit ranker exceptions."""


class RankerError(Exception):
    """Base exception for ranking errors"""


class InvalidScoringInput(RankerError):
    """Raised when a scoring curve or measured value is malformed"""


class InvalidAuditDetails(RankerError):
    """Raised when an audit's details payload has the wrong shape"""


class ReportLoadError(RankerError):
    """Raised when a report cannot be read, fetched or parsed"""
