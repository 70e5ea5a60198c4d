# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas and the Success/Failure result type
# - services/: The in-memory people store and the operations on it
#
# Code in this package should NOT use FastAPI directly. The only app-layer
# import is the shared exception classes in app.exceptions.
# =============================================================================
