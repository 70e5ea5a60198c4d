# =============================================================================
# core/services/people_service.py - People Business Logic
# =============================================================================
# Handles person CRUD operations on top of a PeopleStore.
# Every operation returns a Success/Failure result instead of raising,
# so the API layer only has to pick a status code and encode it.
# =============================================================================

import logging

from app.exceptions import PersonNotFoundError
from core.models.person import Empty, PersonData, PersonId, PersonList, PersonRecord
from core.models.result import Failure, Result, Success
from core.services.people_store import PeopleStore

logger = logging.getLogger(__name__)


class PeopleService:
    """
    Service for person management operations.

    Provides a clean interface between API routes and the store.
    The store is owned by the caller and passed in, so each application
    (and each test) works against its own data.
    """

    def __init__(self, store: PeopleStore):
        self.store = store

    def list_people(self) -> Result[PersonList]:
        """List every stored person, ordered by id."""
        people = [
            PersonRecord(id=person_id, **person.model_dump())
            for person_id, person in self.store.list_all()
        ]
        return Success(PersonList(people=people))

    def get_person(self, person_id: int) -> Result[PersonData]:
        """
        Get a person by id.

        Returns:
            Success with the person, or Failure if the id is unknown
        """
        try:
            return Success(self.store.get(person_id))
        except PersonNotFoundError as e:
            logger.info(f"Person not found: {person_id}")
            return Failure(e.message)

    def create_person(self, data: PersonData) -> Result[PersonId]:
        """
        Create a new person.

        Always succeeds; the store picks the id.
        """
        person_id = self.store.create(data)
        logger.info(f"Created person: {person_id}")
        return Success(PersonId(id=person_id))

    def edit_person(self, person_id: int, data: PersonData) -> Result[Empty]:
        """Replace the record of an existing person."""
        try:
            self.store.edit(person_id, data)
        except PersonNotFoundError as e:
            logger.info(f"Cannot edit, person not found: {person_id}")
            return Failure(e.message)

        logger.info(f"Edited person: {person_id}")
        return Success(Empty())

    def delete_person(self, person_id: int) -> Result[Empty]:
        """
        Delete a person.

        Deleting the same id twice fails the second time.
        """
        try:
            self.store.delete(person_id)
        except PersonNotFoundError as e:
            logger.info(f"Cannot delete, person not found: {person_id}")
            return Failure(e.message)

        logger.info(f"Deleted person: {person_id}")
        return Success(Empty())
