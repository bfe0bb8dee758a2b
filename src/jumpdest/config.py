"""
A module for managing analysis configuration.

Classes:
- OutOfRangePolicy: What a query past the end of the code returns.
- AnalysisConfig: Holds the settings shared by every query against a verified
  set of jump destinations.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class OutOfRangePolicy(str, Enum):
    """How to answer a query for a position at or past the end of the code."""

    RAISE = "raise"
    """Reject the query with `OutOfRangeQuery`."""

    FALSE = "false"
    """Answer that the position is not a valid jump destination."""


class AnalysisConfig(BaseModel):
    """A class for accessing jump destination analysis configurations."""

    model_config = ConfigDict(frozen=True)

    OUT_OF_RANGE_POLICY: OutOfRangePolicy = OutOfRangePolicy.RAISE
    """The policy applied to queries past the end of the code."""


DEFAULT_CONFIG = AnalysisConfig()
