"""
harvestsheet: A CLI tool for turning Harvest time entries into timesheets.

- Offers the current semi-monthly billing periods to choose from
- Fetches the time entries of one client from the Harvest v2 API
- Summarizes them into one row per day and exports the rows to CSV
- Optionally creates and sends an invoice for the period

Configuration is read from a `.env` file (see `.env.example`).
"""

__version__ = "0.1.0"
