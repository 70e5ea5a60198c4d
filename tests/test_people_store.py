# =============================================================================
# tests/test_people_store.py - People Store Tests
# =============================================================================
# This module contains tests for:
# - Seed records and their ids
# - Id assignment (increasing, never reused)
# - Get/create/edit/delete behavior and not-found errors
# - Immutable records (changes only go through edit)
# - Serialized access from many threads
# =============================================================================

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
from pydantic import ValidationError

from app.exceptions import PersonNotFoundError
from core.models import PersonData
from core.services import SEED_PEOPLE, PeopleStore


def make_person(n: int) -> PersonData:
    return PersonData(first_name=f"First{n}", last_name=f"Last{n}", born=date(1900, 1, 1))


# =============================================================================
# Seeding
# =============================================================================

class TestSeed:
    """Test the four historical seed records."""

    def test_seed_ids(self, store: PeopleStore):
        assert store.seed() == [1, 2, 3, 4]
        assert len(store) == 4

    def test_seed_order(self, seeded_store: PeopleStore):
        """Seed order determines seed ids."""
        last_names = [seeded_store.get(i).last_name for i in range(1, 5)]
        assert last_names == ["Church", "Turing", "Russell", "Chomsky"]

    def test_chomsky_has_no_death_date(self, seeded_store: PeopleStore):
        assert seeded_store.get(4).died is None
        assert all(p.died is not None for p in SEED_PEOPLE[:3])

    def test_fifth_id_missing(self, seeded_store: PeopleStore):
        with pytest.raises(PersonNotFoundError):
            seeded_store.get(5)


# =============================================================================
# CRUD
# =============================================================================

class TestCrud:
    """Test store operations."""

    def test_first_id_is_one(self, store: PeopleStore, sample_person: PersonData):
        assert store.create(sample_person) == 1

    def test_create_then_get(self, seeded_store: PeopleStore, sample_person: PersonData):
        person_id = seeded_store.create(sample_person)

        assert person_id == 5
        assert seeded_store.get(person_id) == sample_person

    def test_edit_replaces_record(self, seeded_store: PeopleStore, sample_person: PersonData):
        seeded_store.edit(2, sample_person)

        assert seeded_store.get(2) == sample_person
        assert len(seeded_store) == 4

    def test_edit_twice_same_state(self, seeded_store: PeopleStore, sample_person: PersonData):
        seeded_store.edit(1, sample_person)
        once = seeded_store.list_all()
        seeded_store.edit(1, sample_person)

        assert seeded_store.list_all() == once

    def test_edit_missing(self, store: PeopleStore, sample_person: PersonData):
        with pytest.raises(PersonNotFoundError) as exc_info:
            store.edit(42, sample_person)

        assert exc_info.value.details == {"person_id": 42}
        assert exc_info.value.status_code == 404
        assert exc_info.value.to_dict() == {"result": "failure", "message": "Person not found."}
        assert len(store) == 0

    def test_delete(self, seeded_store: PeopleStore):
        seeded_store.delete(3)

        with pytest.raises(PersonNotFoundError):
            seeded_store.get(3)

    def test_delete_twice_fails(self, seeded_store: PeopleStore):
        seeded_store.delete(3)

        with pytest.raises(PersonNotFoundError):
            seeded_store.delete(3)

    def test_ids_not_reused_after_delete(self, seeded_store: PeopleStore, sample_person: PersonData):
        seeded_store.delete(4)

        assert seeded_store.create(sample_person) == 5

    def test_list_all_ordered(self, seeded_store: PeopleStore):
        seeded_store.delete(2)

        assert [person_id for person_id, _ in seeded_store.list_all()] == [1, 3, 4]


# =============================================================================
# Record Isolation
# =============================================================================

class TestRecordIsolation:
    """Test that stored records cannot be changed behind the lock."""

    def test_seed_records_cannot_be_changed(self, seeded_store: PeopleStore):
        with pytest.raises(ValidationError):
            seeded_store.get(1).last_name = "Mutated"

        other = PeopleStore()
        other.seed()
        assert other.get(1).last_name == "Church"
        assert seeded_store.get(1).last_name == "Church"

    def test_created_record_cannot_be_changed_by_caller(
        self, store: PeopleStore, sample_person: PersonData
    ):
        person_id = store.create(sample_person)

        with pytest.raises(ValidationError):
            sample_person.first_name = "Changed outside lock"

        assert store.get(person_id).first_name == "Grace"

    def test_update_goes_through_edit(self, store: PeopleStore, sample_person: PersonData):
        person_id = store.create(sample_person)
        store.edit(person_id, sample_person.model_copy(update={"first_name": "Amazing Grace"}))

        assert store.get(person_id).first_name == "Amazing Grace"
        assert sample_person.first_name == "Grace"


# =============================================================================
# Concurrency
# =============================================================================

class TestConcurrency:
    """Test that concurrent access never loses or duplicates ids."""

    def test_concurrent_creates_get_distinct_ids(self, store: PeopleStore):
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda n: store.create(make_person(n)), range(200)))

        assert len(set(ids)) == 200
        assert sorted(ids) == list(range(1, 201))
        assert len(store) == 200

    def test_sequential_ids_strictly_increase(self, store: PeopleStore):
        ids = [store.create(make_person(n)) for n in range(10)]

        assert all(a < b for a, b in zip(ids, ids[1:]))
