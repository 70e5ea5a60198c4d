# =============================================================================
# core/services/people_store.py - In-Memory People Store
# =============================================================================
# Holds the person records of one running application.
#
# The store maps integer ids to PersonData and owns id assignment:
# ids start at 1, only ever increase, and are never reused - not even
# after the person holding one has been deleted.
#
# One lock guards the whole map and the id counter. Every operation,
# read or write, holds it from start to finish, so store access is
# fully serialized across request threads.
# =============================================================================

import logging
import threading
from collections.abc import Iterable
from datetime import date

from core.models.person import PersonData
from app.exceptions import PersonNotFoundError

logger = logging.getLogger(__name__)


# Records every fresh store is seeded with, in id order (1-4)
SEED_PEOPLE: tuple[PersonData, ...] = (
    PersonData(
        first_name="Alonzo",
        last_name="Church",
        born=date(1903, 6, 14),
        died=date(1995, 8, 11),
    ),
    PersonData(
        first_name="Alan",
        last_name="Turing",
        born=date(1912, 6, 23),
        died=date(1954, 6, 7),
    ),
    PersonData(
        first_name="Bertrand",
        last_name="Russell",
        born=date(1872, 5, 18),
        died=date(1970, 2, 2),
    ),
    PersonData(
        first_name="Noam",
        last_name="Chomsky",
        born=date(1928, 12, 7),
    ),
)


class PeopleStore:
    """
    Thread-safe in-memory person store.

    Example:
        store = PeopleStore()
        person_id = store.create(PersonData(first_name="Ada", ...))
        store.get(person_id)
        store.delete(person_id)
    """

    def __init__(self) -> None:
        self._people: dict[int, PersonData] = {}
        # Highest id handed out so far
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    def get(self, person_id: int) -> PersonData:
        """
        Get a person by id.

        Raises:
            PersonNotFoundError: If no person is stored under this id
        """
        with self._lock:
            try:
                return self._people[person_id]
            except KeyError:
                raise PersonNotFoundError(person_id) from None

    def list_all(self) -> list[tuple[int, PersonData]]:
        """Snapshot of all stored people as (id, person) pairs, ordered by id."""
        with self._lock:
            return sorted(self._people.items())

    def create(self, data: PersonData) -> int:
        """
        Store a new person.

        Returns:
            The id assigned to the person
        """
        with self._lock:
            self._last_id += 1
            self._people[self._last_id] = data
            return self._last_id

    def edit(self, person_id: int, data: PersonData) -> None:
        """
        Replace the whole record stored under an existing id.

        Raises:
            PersonNotFoundError: If no person is stored under this id
        """
        with self._lock:
            if person_id not in self._people:
                raise PersonNotFoundError(person_id)
            self._people[person_id] = data

    def delete(self, person_id: int) -> None:
        """
        Remove a person.

        Raises:
            PersonNotFoundError: If no person is stored under this id
        """
        with self._lock:
            if self._people.pop(person_id, None) is None:
                raise PersonNotFoundError(person_id)

    def seed(self, people: Iterable[PersonData] = SEED_PEOPLE) -> list[int]:
        """Create each person in order and return the assigned ids."""
        ids = [self.create(person) for person in people]
        logger.info(f"Seeded people store with {len(ids)} records")
        return ids
