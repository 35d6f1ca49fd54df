"""actionkit - numeric and encoding core for on-chain DeFi action workflows."""

from actionkit.errors import (
    ActionError,
    ErrorKind,
    InvalidCollaboratorResponse,
    MissingConfiguration,
    NonSuccessSettlement,
    PoolUninitialized,
    PriceAtBound,
    StaleReading,
)
from actionkit.models.results import ActionResult

__version__ = "0.1.0"
__all__ = [
    "ActionError",
    "ActionResult",
    "ErrorKind",
    "InvalidCollaboratorResponse",
    "MissingConfiguration",
    "NonSuccessSettlement",
    "PoolUninitialized",
    "PriceAtBound",
    "StaleReading",
    "__version__",
]
