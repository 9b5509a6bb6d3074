"""Report generation modules for harvestsheet."""

from .time_entry import TimeEntry
from .timesheet import Row, aggregate_entries
from .report_generator import TimesheetReport, total_hours, rows_to_csv

__all__ = ['TimeEntry', 'Row', 'aggregate_entries', 'TimesheetReport', 'total_hours', 'rows_to_csv']
