"""TimeEntry class for representing Harvest time entries."""
from typing import Any, Dict

from ..utils.format_utils import normalize_task_name


class TimeEntry:
    """Class representing a Harvest time entry."""

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Harvest API
        """
        self.raw_data = entry_data
        self.spent_date = entry_data["spent_date"]
        self.rounded_hours = entry_data.get("rounded_hours") or 0
        self.task_name = (entry_data.get("task") or {}).get("name") or ""

    @property
    def notes(self) -> str:
        """Get the task name as it appears in the timesheet notes.

        Returns:
            Task name with " / " replaced by " & "
        """
        return normalize_task_name(self.task_name)

    def __repr__(self) -> str:
        return f"TimeEntry({self.spent_date!r}, {self.rounded_hours!r}, {self.task_name!r})"
