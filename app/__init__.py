# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, home page
# - config.py: Environment variable loading and settings
# - exceptions.py: API exceptions and their JSON handlers
# - dependencies.py: Dependency injection of the people service
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
