"""Daily timesheet rows and their aggregation from time entries."""
from typing import Any, Dict, Iterable, List, Union

from .time_entry import TimeEntry


class Row:
    """One timesheet line: the hours and tasks of a single day."""

    def __init__(self, date: str, hours: float, notes: str):
        self.date = date
        self.hours = hours
        self.notes = notes

    def add(self, entry: TimeEntry):
        """Fold another entry of the same day into this row.

        The task is appended to the notes unless it already occurs in them
        as a substring.

        Args:
            entry: Time entry spent on this row's date
        """
        self.hours += entry.rounded_hours
        if entry.notes not in self.notes:
            self.notes = "; ".join([self.notes, entry.notes])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return (self.date, self.hours, self.notes) == (other.date, other.hours, other.notes)

    def __repr__(self) -> str:
        return f"Row(date={self.date!r}, hours={self.hours!r}, notes={self.notes!r})"


def aggregate_entries(entries: Iterable[Union[TimeEntry, Dict[str, Any]]]) -> List[Row]:
    """Reduce time entries to one row per date.

    Args:
        entries: TimeEntry objects or raw API entry dicts

    Returns:
        Rows in the order their dates first appear in the entries
    """
    rows: Dict[str, Row] = {}
    for entry in entries:
        if not isinstance(entry, TimeEntry):
            entry = TimeEntry(entry)
        row = rows.get(entry.spent_date)
        if row is None:
            rows[entry.spent_date] = Row(entry.spent_date, entry.rounded_hours, entry.notes)
        else:
            row.add(entry)
    return list(rows.values())
