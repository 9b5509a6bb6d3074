import sys
import os
import shutil
import tempfile
import unittest
from datetime import date
from io import StringIO
from unittest.mock import patch, MagicMock

import requests

# Add the parent directory to sys.path to import the harvestsheet package,
# and this directory for the scripted prompter
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from harvestsheet.__main__ import main
from harvestsheet.config import Config
from harvestsheet.errors import ScaleLimitError
from harvestsheet.session import TimesheetSession, invoice_dates, invoice_subject
from harvestsheet.utils.date_utils import Period
from scripted_prompter import ScriptedPrompter


class FakeHarvestClient:
    """In-memory stand-in for HarvestClient."""

    def __init__(self, entries=None, total_pages=1, projects=None):
        self.clients = [{"id": 1, "name": "Old Client"}, {"id": 2, "name": "Acme"}]
        self.entries = entries or []
        self.total_pages = total_pages
        self.projects = [{"id": 30, "name": "Website"}] if projects is None else projects
        self.calls = []

    def list_clients(self, is_active=True):
        self.calls.append(("list_clients", is_active))
        return self.clients

    def list_time_entries(self, client_id, from_date, to_date):
        self.calls.append(("list_time_entries", client_id, from_date, to_date))
        return {"time_entries": self.entries, "total_pages": self.total_pages, "per_page": 100}

    def list_projects(self, client_id, is_active=True):
        self.calls.append(("list_projects", client_id))
        return self.projects

    def create_invoice(self, client_id, **kwargs):
        self.calls.append(("create_invoice", client_id, kwargs))
        return {"id": 555}

    def send_invoice(self, invoice_id):
        self.calls.append(("send_invoice", invoice_id))
        return {"event_type": "send"}


ENTRIES = [
    {"spent_date": "2024-02-03", "rounded_hours": 2, "task": {"name": "Development"}},
    {"spent_date": "2024-02-01", "rounded_hours": 1.5, "task": {"name": "Design / Review"}},
    {"spent_date": "2024-02-03", "rounded_hours": 1, "task": {"name": "Meetings"}},
]


class TestTimesheetSession(unittest.TestCase):
    """Test the session from period selection to invoice."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.config = Config("acme", "123", "secret", os.path.join(self.tmpdir, "out"))
        self.stdout_patcher = patch('sys.stdout', new_callable=StringIO)
        self.mock_stdout = self.stdout_patcher.start()

    def tearDown(self):
        self.stdout_patcher.stop()
        shutil.rmtree(self.tmpdir)

    def make_session(self, client, answers):
        # today = 2024-02-20 offers [Feb 1-15, Feb 16-29]
        return TimesheetSession(self.config, client, ScriptedPrompter(answers), today=date(2024, 2, 20))

    def test_writes_csv_without_invoice(self):
        client = FakeHarvestClient(entries=ENTRIES)
        # period Feb 1-15, first listed choice (Acme, reversed), no invoice
        result = self.make_session(client, [0, 0, False]).run()

        self.assertEqual(result.client_id, 2)
        self.assertEqual(result.csv_path, os.path.join(self.tmpdir, "out", "timesheet-2-2024-02-15.csv"))
        with open(result.csv_path, encoding="utf-8") as f:
            content = f.read()
        self.assertEqual(
            content,
            'Date,Hours,Notes\n2024-02-03,3,"Development; Meetings"\n2024-02-01,1.5,"Design & Review"'
        )
        self.assertIn(("list_time_entries", 2, "2024-02-01", "2024-02-15"), client.calls)
        self.assertIsNone(result.invoice)
        self.assertNotIn("list_projects", [call[0] for call in client.calls])

        output = self.mock_stdout.getvalue()
        self.assertIn("Total 4.5", output)
        self.assertIn("CSV written to", output)

    def test_clients_are_offered_in_reverse(self):
        client = FakeHarvestClient(entries=ENTRIES)
        result = self.make_session(client, [1, 1, False]).run()

        self.assertEqual(result.client_id, 1)
        self.assertEqual(result.period, Period(date(2024, 2, 16), date(2024, 2, 29)))
        self.assertTrue(result.csv_path.endswith("timesheet-1-2024-02-29.csv"))

    def test_too_many_entries_writes_nothing(self):
        client = FakeHarvestClient(entries=ENTRIES, total_pages=2)

        with self.assertRaises(ScaleLimitError):
            self.make_session(client, [0, 0, False]).run()
        self.assertFalse(os.path.exists(os.path.join(self.tmpdir, "out")))

    def test_creates_and_sends_invoice(self):
        client = FakeHarvestClient(entries=ENTRIES)
        result = self.make_session(client, [0, 0, True]).run()

        self.assertEqual(result.invoice, {"id": 555})
        create = [call for call in client.calls if call[0] == "create_invoice"][0]
        self.assertEqual(create[1], 2)
        self.assertEqual(create[2], {
            "subject": "Invoice for 2024-02-01 to 2024-02-15 at Website",
            "issue_date": "2024-02-16",
            "due_date": "2024-03-10",
            "project_ids": [30],
            "from_date": "2024-02-01",
            "to_date": "2024-02-15",
        })
        self.assertEqual(client.calls[-1], ("send_invoice", 555))
        self.assertIn("https://acme.harvestapp.com/invoices/555", self.mock_stdout.getvalue())

    def test_more_than_one_project_aborts_invoice(self):
        client = FakeHarvestClient(entries=ENTRIES, projects=[{"id": 1, "name": "A"}, {"id": 2, "name": "B"}])

        with self.assertRaises(ScaleLimitError):
            self.make_session(client, [0, 0, True]).run()
        self.assertNotIn("create_invoice", [call[0] for call in client.calls])
        # The CSV was already written
        self.assertTrue(os.path.exists(os.path.join(self.tmpdir, "out", "timesheet-2-2024-02-15.csv")))

    def test_no_project_skips_invoice(self):
        client = FakeHarvestClient(entries=ENTRIES, projects=[])
        with patch('sys.stderr', new_callable=StringIO) as mock_stderr:
            result = self.make_session(client, [0, 0, True]).run()

        self.assertIsNone(result.invoice)
        self.assertIn("[WARN]", self.mock_stdout.getvalue())
        self.assertEqual(mock_stderr.getvalue(), "")

    def test_empty_period_writes_header_only(self):
        client = FakeHarvestClient(entries=[])
        result = self.make_session(client, [0, 0, False]).run()

        with open(result.csv_path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "Date,Hours,Notes")


class TestInvoiceHelpers(unittest.TestCase):

    def test_invoice_dates(self):
        issue, due = invoice_dates(Period(date(2023, 12, 16), date(2023, 12, 31)))
        self.assertEqual(issue, date(2024, 1, 1))
        self.assertEqual(due, date(2024, 1, 24))

    def test_invoice_subject(self):
        period = Period(date(2024, 2, 16), date(2024, 2, 29))
        self.assertEqual(invoice_subject(period, "Website"), "Invoice for 2024-02-16 to 2024-02-29 at Website")


class TestMain(unittest.TestCase):
    """Test exit codes of the command line entry point."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.env_file = os.path.join(self.tmpdir, ".env")
        self.out_dir = os.path.join(self.tmpdir, "out")
        with open(self.env_file, "w", encoding="utf-8") as f:
            f.write(f"SUBDOMAIN=acme\nACCOUNT_ID=123\nACCESS_TOKEN=secret\nOUTPUT_FOLDER={self.out_dir}\n")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_main(self, client, answers, extra_args=()):
        with patch('harvestsheet.__main__.HarvestClient', return_value=client), \
                patch('harvestsheet.__main__.Prompter', return_value=ScriptedPrompter(answers)), \
                patch('harvestsheet.session.date') as mock_date, \
                patch('sys.stdout', new_callable=StringIO), \
                patch('sys.stderr', new_callable=StringIO) as mock_stderr:
            mock_date.today.return_value = date(2024, 2, 20)
            with self.assertRaises(SystemExit) as ctx:
                main(["--env-file", self.env_file] + list(extra_args))
        return ctx.exception.code, mock_stderr.getvalue()

    def test_success_exits_zero(self):
        code, _ = self.run_main(FakeHarvestClient(entries=ENTRIES), [0, 0, False])
        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(os.path.join(self.out_dir, "timesheet-2-2024-02-15.csv")))

    def test_too_many_entries_exits_one(self):
        code, stderr = self.run_main(FakeHarvestClient(entries=ENTRIES, total_pages=3), [0, 0, False])
        self.assertEqual(code, 1)
        self.assertIn("more than 100 time entries", stderr)
        self.assertFalse(os.path.exists(self.out_dir))

    def test_too_many_projects_exits_one(self):
        client = FakeHarvestClient(entries=ENTRIES, projects=[{"id": 1, "name": "A"}, {"id": 2, "name": "B"}])
        code, stderr = self.run_main(client, [0, 0, True])
        self.assertEqual(code, 1)
        self.assertIn("more than one active project", stderr)

    def test_api_failure_exits_one(self):
        client = MagicMock()
        client.list_clients.side_effect = requests.RequestException("API request failed")
        code, stderr = self.run_main(client, [0])
        self.assertEqual(code, 1)
        self.assertIn("[ERROR] API request failed", stderr)

    def test_cancel_exits_zero(self):
        code, _ = self.run_main(FakeHarvestClient(entries=ENTRIES), [])
        self.assertEqual(code, 0)

    def test_configure_flag_runs_wizard(self):
        answers = ["other", "", "", "", 0, 0, False]
        code, _ = self.run_main(FakeHarvestClient(entries=ENTRIES), answers, ["--configure"])
        self.assertEqual(code, 0)
        with open(self.env_file, encoding="utf-8") as f:
            self.assertIn("SUBDOMAIN='other'", f.read())


if __name__ == '__main__':
    unittest.main()
