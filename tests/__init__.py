# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the PeopleDb API:
# - test_models.py: Unit tests for person models and result encoding
# - test_people_store.py: Tests for the in-memory store and its lock
# - test_people_service.py: Tests for operation results
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
