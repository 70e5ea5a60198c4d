# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .people_store import PeopleStore, SEED_PEOPLE
from .people_service import PeopleService

__all__ = [
    "PeopleStore",
    "PeopleService",
    "SEED_PEOPLE",
]
