"""
HarvestClient: A client for interacting with the Harvest v2 API.
"""
import requests
from typing import Optional, Dict, Any, List

from .. import __version__

# Single page size this tool reads; larger result sets are not supported
PER_PAGE = 100


class HarvestClient:
    """A client for interacting with the Harvest v2 API.

    Requests are sent one at a time and never retried.
    """

    def __init__(self, access_token: str, account_id: str, user_agent: Optional[str] = None,
                 timeout: float = 30):
        """Initialize the HarvestClient.

        Args:
            access_token: Harvest personal access token
            account_id: Harvest account ID
            user_agent: User-Agent header (optional)
            timeout: Seconds to wait for each response (optional)
        """
        self.access_token = access_token
        self.account_id = account_id
        self.user_agent = user_agent or f"harvestsheet v{__version__}"
        self.timeout = timeout
        self.base_url = "https://api.harvestapp.com/v2"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Harvest-Account-ID": str(self.account_id),
            "User-Agent": self.user_agent,
        }

    def api_request(self, method: str, path: str, params: Optional[dict] = None,
                    json: Optional[dict] = None) -> Any:
        """Make a request to the Harvest API.

        Args:
            method: HTTP method
            path: Endpoint path below the base URL (e.g. "/clients")
            params: Query parameters (optional)
            json: JSON body (optional)

        Returns:
            API response as JSON

        Raises:
            requests.RequestException: If the API request fails
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.request(method, url, headers=self.headers, params=params,
                                    json=json, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise requests.RequestException(f"API request failed ({method} {path}): {e}") from e

    def list_clients(self, is_active: bool = True) -> List[Dict[str, Any]]:
        """Get the clients of the account.

        Args:
            is_active: Only return active clients

        Returns:
            List of clients
        """
        params = {"is_active": str(is_active).lower(), "per_page": PER_PAGE}
        return self.api_request("GET", "/clients", params)["clients"]

    def list_time_entries(self, client_id, from_date: str, to_date: str) -> Dict[str, Any]:
        """Get the first page of time entries of a client in a date range.

        Args:
            client_id: Harvest client ID
            from_date: First day (YYYY-MM-DD)
            to_date: Last day (YYYY-MM-DD), inclusive

        Returns:
            The response page, with "time_entries" and "total_pages"
        """
        params = {
            "client_id": client_id,
            "from": from_date,
            "to": to_date,
            "per_page": PER_PAGE,
        }
        return self.api_request("GET", "/time_entries", params)

    def list_projects(self, client_id, is_active: bool = True) -> List[Dict[str, Any]]:
        """Get the projects of a client.

        Args:
            client_id: Harvest client ID
            is_active: Only return active projects

        Returns:
            List of projects
        """
        params = {"client_id": client_id, "is_active": str(is_active).lower(), "per_page": PER_PAGE}
        return self.api_request("GET", "/projects", params)["projects"]

    def create_invoice(self, client_id, subject: str, issue_date: str, due_date: str,
                       project_ids: List[Any], from_date: str, to_date: str) -> Dict[str, Any]:
        """Create a draft invoice with line items imported from tracked time.

        Args:
            client_id: Harvest client ID
            subject: Invoice subject
            issue_date: Issue date (YYYY-MM-DD)
            due_date: Due date (YYYY-MM-DD)
            project_ids: Projects to import time from
            from_date: First day of imported time (YYYY-MM-DD)
            to_date: Last day of imported time (YYYY-MM-DD)

        Returns:
            The created invoice
        """
        body = {
            "client_id": client_id,
            "subject": subject,
            "issue_date": issue_date,
            "due_date": due_date,
            "payment_term": "custom",
            "line_items_import": {
                "project_ids": list(project_ids),
                "time": {
                    "summary_type": "detailed",
                    "from": from_date,
                    "to": to_date,
                },
            },
        }
        return self.api_request("POST", "/invoices", json=body)

    def send_invoice(self, invoice_id) -> Dict[str, Any]:
        """Mark an invoice as sent.

        Args:
            invoice_id: Harvest invoice ID

        Returns:
            The created invoice message
        """
        return self.api_request("POST", f"/invoices/{invoice_id}/messages", json={"event_type": "send"})
