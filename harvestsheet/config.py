"""Configuration handling for harvestsheet.

Settings live in a dotenv file (`.env` in the working directory by default)
with the keys SUBDOMAIN, ACCOUNT_ID, ACCESS_TOKEN and OUTPUT_FOLDER.
"""
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values, set_key

from .errors import ConfigError

DEFAULT_ENV_FILE = ".env"
CONFIG_KEYS = ["SUBDOMAIN", "ACCOUNT_ID", "ACCESS_TOKEN", "OUTPUT_FOLDER"]
TOKEN_URL = "https://id.getharvest.com/developers"

WIZARD_QUESTIONS = {
    "SUBDOMAIN": "What is your harvest subdomain?",
    "ACCOUNT_ID": "What is your account ID?",
    "ACCESS_TOKEN": "What is your personal access token?",
    "OUTPUT_FOLDER": "Where should we save the CSV files to?",
}


class Config:
    """Settings needed to talk to Harvest and write timesheets."""

    def __init__(self, subdomain: str, account_id: str, access_token: str, output_folder: str):
        self.subdomain = subdomain
        self.account_id = account_id
        self.access_token = access_token
        self.output_folder = output_folder

    @classmethod
    def from_values(cls, values: Dict[str, Optional[str]]) -> "Config":
        """Build a Config from raw dotenv values.

        Raises:
            ConfigError: If a value is missing or empty
        """
        missing = [key for key in CONFIG_KEYS if not values.get(key)]
        if missing:
            raise ConfigError(f"Missing configuration values: {', '.join(missing)}")
        return cls(
            subdomain=values["SUBDOMAIN"],
            account_id=values["ACCOUNT_ID"],
            access_token=values["ACCESS_TOKEN"],
            output_folder=os.path.expanduser(values["OUTPUT_FOLDER"]),
        )

    @property
    def invoice_base_url(self) -> str:
        return f"https://{self.subdomain}.harvestapp.com/invoices"

    def __repr__(self) -> str:
        return (f"Config(subdomain={self.subdomain!r}, account_id={self.account_id!r}, "
                f"output_folder={self.output_folder!r})")


def read_env_file(env_file: str = DEFAULT_ENV_FILE) -> Dict[str, Optional[str]]:
    """Read the raw configuration values.

    Args:
        env_file: Path of the dotenv file

    Returns:
        Mapping of key to value; empty if the file does not exist
    """
    if not os.path.isfile(env_file):
        return {}
    return dict(dotenv_values(env_file, encoding="utf-8"))


def has_complete_config(values: Dict[str, Optional[str]]) -> bool:
    """Check that every configuration key has a non-empty value."""
    return all(values.get(key) for key in CONFIG_KEYS)


def write_env_file(env_file: str, values: Dict[str, Optional[str]], overwrite: bool = False):
    """Persist configuration values, keeping other lines of the file.

    Empty values are not written.

    Args:
        env_file: Path of the dotenv file
        values: Mapping of key to value
        overwrite: Start from an empty file instead of updating it
    """
    if overwrite:
        open(env_file, 'w', encoding='utf-8').close()
    else:
        Path(env_file).touch()
    for key in CONFIG_KEYS:
        if values.get(key):
            set_key(env_file, key, values[key], quote_mode="always", encoding="utf-8")


def run_wizard(prompter, env_file: str = DEFAULT_ENV_FILE,
               existing: Optional[Dict[str, Optional[str]]] = None,
               overwrite: bool = False) -> Dict[str, Optional[str]]:
    """Ask for every configuration value and save the answers.

    Args:
        prompter: Object with a `text(message, default)` method
        env_file: Path of the dotenv file
        existing: Current values, offered as defaults (optional)
        overwrite: Replace the file instead of updating it (optional)

    Returns:
        The answers
    """
    existing = existing or {}
    print(f"Welcome, make sure you've generated a personal access token over at: {TOKEN_URL}\n")

    defaults = dict(existing)
    defaults["OUTPUT_FOLDER"] = existing.get("OUTPUT_FOLDER") or os.path.join(os.path.expanduser("~"), "Downloads")

    responses = {}
    for key in CONFIG_KEYS:
        responses[key] = prompter.text(WIZARD_QUESTIONS[key], defaults.get(key))

    write_env_file(env_file, responses, overwrite=overwrite)
    print(f"[INFO] Configuration saved to '{env_file}'.")
    return responses


def load_config(prompter, env_file: str = DEFAULT_ENV_FILE, force_wizard: bool = False) -> Config:
    """Load the configuration, running the wizard when it is incomplete.

    Args:
        prompter: Prompter used by the wizard
        env_file: Path of the dotenv file
        force_wizard: Run the wizard even if the configuration is complete

    Returns:
        Complete configuration

    Raises:
        ConfigError: If values are still missing after the wizard
    """
    unreadable = False
    try:
        values = read_env_file(env_file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[WARN] Could not read '{env_file}': {e}")
        values = {}
        unreadable = True

    if force_wizard or unreadable or not has_complete_config(values):
        # An unreadable file is replaced, not updated
        run_wizard(prompter, env_file, values, overwrite=unreadable)
        values = read_env_file(env_file)

    return Config.from_values(values)
