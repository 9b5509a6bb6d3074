"""Harvest API access for harvestsheet."""

from .client import HarvestClient

__all__ = ['HarvestClient']
