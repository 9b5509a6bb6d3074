"""Main module for the harvestsheet package."""
import argparse
import sys
from typing import List, Optional

import requests

from . import __version__
from .api.client import HarvestClient
from .config import DEFAULT_ENV_FILE, load_config
from .errors import ConfigError, HarvestsheetError, PromptCancelled, ScaleLimitError
from .prompts import Prompter
from .session import TimesheetSession


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Export Harvest time entries of a semi-monthly period to a timesheet CSV.",
        epilog="""
Examples:
    # Pick a period and client, write the CSV and optionally send an invoice
  harvestsheet
    ---
    # Re-enter subdomain, account ID, token and output folder first
  harvestsheet --configure
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="harvestsheet"
    )
    parser.add_argument('--configure', action='store_true', help='Run the configuration wizard even if a configuration exists')
    parser.add_argument('--env-file', default=DEFAULT_ENV_FILE, help=f'Configuration file (default: {DEFAULT_ENV_FILE})')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def run(args: argparse.Namespace, prompter=None) -> None:
    """Load the configuration and run one timesheet session.

    Args:
        args: Parsed arguments
        prompter: Prompter to use (defaults to the terminal)
    """
    prompter = prompter or Prompter()
    config = load_config(prompter, args.env_file, force_wizard=args.configure)
    client = HarvestClient(config.access_token, config.account_id)
    TimesheetSession(config, client, prompter).run()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    try:
        run(args)
    except PromptCancelled:
        print("Cancelled.")
        sys.exit(0)
    except (ScaleLimitError, ConfigError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except (HarvestsheetError, requests.RequestException, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
