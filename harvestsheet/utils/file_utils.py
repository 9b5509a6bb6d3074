"""File I/O utility functions for harvestsheet."""
import os


def timesheet_filename(output_folder: str, client_id, end_date: str) -> str:
    """Build the path of the timesheet CSV for a client and period.

    Args:
        output_folder: Folder to write to (may start with ~)
        client_id: Harvest client ID
        end_date: Last day of the period (YYYY-MM-DD)

    Returns:
        Path of the CSV file
    """
    folder = os.path.expanduser(output_folder)
    return os.path.join(folder, f"timesheet-{client_id}-{end_date}.csv")


def write_csv(filename: str, content: str):
    """Write CSV text to a file, creating its folder if needed.

    Args:
        filename: Output file name
        content: Complete CSV document
    """
    folder = os.path.dirname(filename)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(filename, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
