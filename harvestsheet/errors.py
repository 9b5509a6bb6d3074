"""Exceptions raised by harvestsheet."""


class HarvestsheetError(Exception):
    """Base class for all harvestsheet errors."""


class ConfigError(HarvestsheetError):
    """Configuration is missing values even after running the wizard."""


class ScaleLimitError(HarvestsheetError):
    """The data is larger than this tool supports (entries or projects)."""


class PromptCancelled(HarvestsheetError):
    """The user aborted an interactive prompt."""
