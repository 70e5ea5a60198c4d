# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the PeopleDb API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import (
    PeopleDbException,
    http_exception_handler,
    peopledb_exception_handler,
    validation_exception_handler,
)
from app.routers import health, people
from core.models.result import Failure
from core.services import PeopleService, PeopleStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The store lives exactly as long as the app; nothing is persisted
    on shutdown.
    """
    logger.info(f"Starting PeopleDb API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"People in store: {len(app.state.people_service.store)}")

    yield

    logger.info("Shutting down PeopleDb API")


def create_app(seed: bool | None = None) -> FastAPI:
    """
    Build a PeopleDb application with its own people store.

    Args:
        seed: Pre-fill the store with the four historical people.
              Defaults to settings.SEED_DATABASE.

    Returns:
        FastAPI: The configured application
    """
    if seed is None:
        seed = settings.SEED_DATABASE

    store = PeopleStore()
    if seed:
        store.seed()

    app = FastAPI(
        title="PeopleDb API",
        description="""
## In-Memory People Database

A small CRUD API over a collection of people.

### Quick Start

```bash
# Get a person
curl http://localhost:8000/api/people/1

# Create a person
curl -X POST http://localhost:8000/api/people \\
  -H "Content-Type: application/json" \\
  -d '{"firstName": "Noam", "lastName": "Chomsky", "born": "1928-12-07"}'
```

Every response is either `{"result": "success", ...}` or
`{"result": "failure", "message": "..."}`.
""",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "People",
                "description": "Create, read, update and delete people",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )
    app.state.people_service = PeopleService(store)

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(PeopleDbException, peopledb_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content=Failure("An unexpected error occurred").to_json(),
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    # Person CRUD endpoints
    app.include_router(
        people.router,
        prefix="/api/people",
        tags=["People"]
    )

    # Health check endpoints
    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    # -------------------------------------------------------------------------
    # Home Page
    # -------------------------------------------------------------------------

    @app.get("/", response_class=HTMLResponse, tags=["Root"])
    async def home():
        """
        Home page - says the API is running and links to a sample person.
        """
        person_link = app.url_path_for("get_person", person_id=1)
        return f"""<!DOCTYPE html>
<html>
<head><title>PeopleDb API</title></head>
<body>
<p>API is running.</p>
<p>Try querying: <a href="{person_link}">{person_link}</a></p>
</body>
</html>
"""

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
