"""
Dashboard error types.
"""


class DashboardError(Exception):
    """Base class for errors raised by the dashboard."""


class StorageUnavailable(DashboardError):
    """The detection store could not be reached."""


class MalformedRecord(DashboardError):
    """A stored row could not be turned into a DetectionRecord."""

    def __init__(self, row_id, reason: str):
        self.row_id = row_id
        self.reason = reason
        super().__init__(f"Malformed detection row {row_id!r}: {reason}")
