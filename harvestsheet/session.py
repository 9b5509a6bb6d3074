"""The interactive timesheet session: pick period and client, export, invoice."""
from datetime import date, timedelta
from typing import Any, Dict, Optional

from .config import Config
from .errors import HarvestsheetError, ScaleLimitError
from .reports.report_generator import TimesheetReport
from .utils.date_utils import Period, timesheet_period_choices, to_date_string
from .utils.file_utils import timesheet_filename, write_csv

PAYMENT_TERM_DAYS = 20
TRANSFER_BUFFER_DAYS = 3


def invoice_dates(period: Period):
    """Get the issue and due date of the invoice for a period.

    Args:
        period: Billing period

    Returns:
        Tuple of (issue_date, due_date)
    """
    issue_date = period.end + timedelta(days=1)
    due_date = issue_date + timedelta(days=PAYMENT_TERM_DAYS + TRANSFER_BUFFER_DAYS)
    return issue_date, due_date


def invoice_subject(period: Period, project_name: str) -> str:
    return f"Invoice for {to_date_string(period.start)} to {to_date_string(period.end)} at {project_name}"


class SessionResult:
    """What a finished session produced."""

    def __init__(self, period: Period, client_id: Any, csv_path: str, report: TimesheetReport,
                 invoice: Optional[Dict[str, Any]] = None):
        self.period = period
        self.client_id = client_id
        self.csv_path = csv_path
        self.report = report
        self.invoice = invoice


class TimesheetSession:
    """Runs one timesheet export against Harvest.

    The client needs `list_clients`, `list_time_entries`, `list_projects`,
    `create_invoice` and `send_invoice`; the prompter needs `select` and
    `confirm`.
    """

    def __init__(self, config: Config, client, prompter, today: Optional[date] = None):
        self.config = config
        self.client = client
        self.prompter = prompter
        self.today = today or date.today()

    def run(self) -> SessionResult:
        """Run the session from period selection to the optional invoice.

        Raises:
            ScaleLimitError: If there are more time entries or projects than supported
        """
        period = self.select_period()
        client_id = self.select_client()

        report = self.fetch_report(client_id, period)
        print(report.generate_summary())

        csv_path = timesheet_filename(self.config.output_folder, client_id, to_date_string(period.end))
        write_csv(csv_path, report.to_csv())
        print(f"CSV written to {csv_path}\n")

        result = SessionResult(period, client_id, csv_path, report)
        if self.prompter.confirm("Create and send an invoice for this period?", default=False):
            result.invoice = self.create_invoice(client_id, period)
        return result

    def select_period(self) -> Period:
        return self.prompter.select("Fetch time for which period?", timesheet_period_choices(self.today))

    def select_client(self):
        clients = self.client.list_clients(is_active=True)
        if not clients:
            raise HarvestsheetError("No active clients found in this Harvest account")
        # Reversed: the client usually wanted is last in Harvest's list
        choices = [(client["name"], client["id"]) for client in reversed(clients)]
        return self.prompter.select("Please select which client to download data for:", choices)

    def fetch_report(self, client_id, period: Period) -> TimesheetReport:
        """Fetch the client's time entries for a period and summarize them.

        Raises:
            ScaleLimitError: If the entries do not fit in a single page
        """
        page = self.client.list_time_entries(
            client_id, to_date_string(period.start), to_date_string(period.end)
        )
        if (page.get("total_pages") or 1) > 1:
            raise ScaleLimitError("This tool doesn't handle more than 100 time entries")
        return TimesheetReport(page.get("time_entries") or [])

    def create_invoice(self, client_id, period: Period) -> Optional[Dict[str, Any]]:
        """Create an invoice for the period and mark it as sent.

        Returns:
            The invoice, or None if the client has no active project

        Raises:
            ScaleLimitError: If the client has more than one active project
        """
        projects = self.client.list_projects(client_id, is_active=True)
        if len(projects) > 1:
            raise ScaleLimitError("This tool doesn't handle clients with more than one active project")
        if not projects:
            print("[WARN] The client has no active project, skipping the invoice.")
            return None

        project = projects[0]
        issue_date, due_date = invoice_dates(period)
        invoice = self.client.create_invoice(
            client_id,
            subject=invoice_subject(period, project["name"]),
            issue_date=to_date_string(issue_date),
            due_date=to_date_string(due_date),
            project_ids=[project["id"]],
            from_date=to_date_string(period.start),
            to_date=to_date_string(period.end),
        )
        self.client.send_invoice(invoice["id"])
        print(f"Invoice sent: {self.config.invoice_base_url}/{invoice['id']}\n")
        return invoice
