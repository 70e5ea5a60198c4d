# =============================================================================
# app/routers/people.py - Person CRUD Endpoints
# =============================================================================
# Maps the REST API onto PeopleService operations:
#   GET    /api/people        -> list_people
#   GET    /api/people/{id}   -> get_person
#   POST   /api/people        -> create_person
#   PUT    /api/people/{id}   -> edit_person
#   DELETE /api/people/{id}   -> delete_person
#
# Handlers are plain functions: FastAPI runs them on its thread pool and
# the store lock serializes access between them.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse

from app.dependencies import PeopleServiceDep
from core.models.person import PersonData
from core.models.result import Result

router = APIRouter()

PersonIdPath = Annotated[int, Path(description="Person id")]


def json_content(result: Result) -> JSONResponse:
    """
    Render an operation result as a JSON response.

    Success -> 200, Failure -> 404 (the only failure is an unknown id).
    """
    return JSONResponse(
        status_code=200 if result.is_success else 404,
        content=result.to_json(),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get("")
def list_people(service: PeopleServiceDep):
    """
    List all people.

    Returns every stored person with its id, ordered by id.
    """
    return json_content(service.list_people())


@router.get("/{person_id}")
def get_person(person_id: PersonIdPath, service: PeopleServiceDep):
    """
    Get a person.

    Returns the person's fields flattened next to "result": "success",
    or 404 if no person has this id.
    """
    return json_content(service.get_person(person_id))


@router.post("")
def create_person(person: PersonData, service: PeopleServiceDep):
    """
    Create a person.

    Returns the id assigned to the new person.
    """
    return json_content(service.create_person(person))


@router.put("/{person_id}")
def edit_person(person_id: PersonIdPath, person: PersonData, service: PeopleServiceDep):
    """
    Replace a person's record.

    The whole record is replaced; the id does not change.
    """
    return json_content(service.edit_person(person_id, person))


@router.delete("/{person_id}")
def delete_person(person_id: PersonIdPath, service: PeopleServiceDep):
    """Delete a person."""
    return json_content(service.delete_person(person_id))
