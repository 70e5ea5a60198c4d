# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the schemas shared by the API and the service layer:
# - person.py: Person record schemas and operation payloads
# - result.py: Success/Failure result type and its flat JSON encoding
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Person Models
# -----------------------------------------------------------------------------
from .person import (
    Empty,
    PersonData,
    PersonId,
    PersonList,
    PersonRecord,
)

# -----------------------------------------------------------------------------
# Result Models
# -----------------------------------------------------------------------------
from .result import (
    Failure,
    Result,
    Success,
)

__all__ = [
    # Person
    "Empty",
    "PersonData",
    "PersonId",
    "PersonList",
    "PersonRecord",
    # Result
    "Failure",
    "Result",
    "Success",
]
