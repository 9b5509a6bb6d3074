"""Formatting utility functions for harvestsheet."""
from typing import Union

Number = Union[int, float]


def format_hours(hours: Number) -> str:
    """Format an hour amount without a trailing ".0".

    Args:
        hours: Number of hours (e.g. 3.5 or 4.0)

    Returns:
        "4" for whole numbers, the shortest exact form otherwise ("3.5")
    """
    value = float(hours)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def quote_field(value: str) -> str:
    """Quote a CSV field, doubling any embedded quotes.

    Args:
        value: Raw field value

    Returns:
        Field wrapped in double quotes
    """
    return '"' + value.replace('"', '""') + '"'


def normalize_task_name(name: str) -> str:
    """Replace the first " / " of a task name with " & ".

    Args:
        name: Harvest task name (e.g. "Design / Review")

    Returns:
        Normalized name (e.g. "Design & Review")
    """
    return name.replace(" / ", " & ", 1)
