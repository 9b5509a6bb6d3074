"""Utility modules for harvestsheet."""

from .date_utils import Period, to_date_string, last_day_of_month, get_timesheet_periods, timesheet_period_choices
from .format_utils import format_hours, quote_field, normalize_task_name
from .file_utils import timesheet_filename, write_csv

__all__ = [
    'Period', 'to_date_string', 'last_day_of_month', 'get_timesheet_periods', 'timesheet_period_choices',
    'format_hours', 'quote_field', 'normalize_task_name',
    'timesheet_filename', 'write_csv'
]
