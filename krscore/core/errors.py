"""Exception hierarchy for krscore.

The scorer itself never raises; these cover the collaborators around it
that read files (the quality report aggregator).
"""


class KRScoreError(Exception):
    """Base class for all krscore errors."""


class ReportError(KRScoreError):
    """A test-result file exists but cannot be used."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
