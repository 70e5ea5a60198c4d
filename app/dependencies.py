# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.people_service import PeopleService


def get_people_service(request: Request) -> PeopleService:
    """
    Get the people service of the running application.

    The service (and the store behind it) is created by create_app()
    and kept on app.state for the lifetime of the app.
    """
    return request.app.state.people_service


# Type alias for dependency injection
PeopleServiceDep = Annotated[PeopleService, Depends(get_people_service)]
