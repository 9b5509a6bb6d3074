"""TimesheetReport class for rendering timesheet rows."""
from io import StringIO
from typing import Iterable, List

from tabulate import tabulate

from .timesheet import Row, aggregate_entries
from ..utils.format_utils import format_hours, quote_field

CSV_HEADER = "Date,Hours,Notes"


def total_hours(rows: Iterable[Row]) -> float:
    """Sum the hours of all rows.

    Args:
        rows: Timesheet rows

    Returns:
        Grand total (0 for no rows)
    """
    total = 0
    for row in rows:
        total += row.hours
    return total


def rows_to_csv(rows: Iterable[Row]) -> str:
    """Render rows as a CSV document.

    Every row is prefixed with a newline, so the document has no trailing
    newline.

    Args:
        rows: Timesheet rows

    Returns:
        CSV text starting with the header line
    """
    csv = CSV_HEADER
    for row in rows:
        csv += "\n"
        csv += f"{row.date},{format_hours(row.hours)},{quote_field(row.notes)}"
    return csv


class TimesheetReport:
    """Class for summarizing the time entries of one billing period."""

    def __init__(self, entries: list):
        """Initialize a TimesheetReport.

        Args:
            entries: TimeEntry objects or raw Harvest time entry dicts
        """
        self.rows: List[Row] = aggregate_entries(entries)
        self.total_hours = total_hours(self.rows)

    def generate_summary(self) -> str:
        """Generate the console summary.

        Returns:
            Table of rows followed by the total
        """
        output = StringIO()
        print("\nHours:", file=output)
        table_rows = [[row.date, format_hours(row.hours), row.notes] for row in self.rows]
        print(tabulate(table_rows, headers=["Date", "Hours", "Notes"], tablefmt="simple",
                       disable_numparse=True), file=output)
        print(f"\nTotal {format_hours(self.total_hours)}", file=output)
        return output.getvalue()

    def to_csv(self) -> str:
        """Render the rows as CSV text."""
        return rows_to_csv(self.rows)
