# =============================================================================
# core/models/person.py - Person Schemas
# =============================================================================
# These models define the API contract for person operations:
# - PersonData: A person record, used for storage and as request body
# - PersonRecord: A person record together with its store id
# - PersonList: All stored people, returned by the list endpoint
# - PersonId: The id assigned to a newly created person
# - Empty: Success marker for operations that return no data
#
# Attributes are snake_case in Python; the JSON wire names are camelCase
# (firstName, lastName). Dates are written as "YYYY-MM-DD".
# =============================================================================

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PersonData(BaseModel):
    """
    Schema for a person record.

    The id is not part of the record - it is the key the store keeps it
    under. `died` is omitted from JSON output when the person is alive.

    Example:
        {
            "firstName": "Alan",
            "lastName": "Turing",
            "born": "1912-06-23",
            "died": "1954-06-07"
        }
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # Records are replaced whole, never changed in place
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "firstName": "Noam",
                    "lastName": "Chomsky",
                    "born": "1928-12-07",
                },
            ]
        },
    )

    first_name: str = Field(
        ...,
        description="Given name"
    )

    last_name: str = Field(
        ...,
        description="Family name"
    )

    born: date = Field(
        ...,
        description="Date of birth (YYYY-MM-DD)"
    )

    # None while the person is alive; never serialized as null
    died: date | None = Field(
        default=None,
        description="Date of death (YYYY-MM-DD), absent if still alive"
    )


class PersonRecord(PersonData):
    """A stored person together with the id it is kept under."""

    id: int = Field(
        ...,
        ge=1,
        description="Store-assigned person id"
    )


class PersonList(BaseModel):
    """
    Schema for listing all stored people.

    Returned by GET /api/people, ordered by id.
    """

    people: list[PersonRecord] = Field(
        default_factory=list,
        description="All stored people"
    )


class PersonId(BaseModel):
    """Id of a newly created person, returned by POST /api/people."""

    id: int = Field(
        ...,
        ge=1,
        description="Store-assigned person id"
    )


class Empty(BaseModel):
    """Success marker carrying no fields (edit and delete)."""
