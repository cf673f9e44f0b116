"""
Test Suite for the Book Library API Checks

Test Organization:
- conftest.py: Shared fixtures (settings, transport, token, book payloads)
- test_validation.py / test_contracts.py: Contract validation and the registry
- test_http.py / test_services.py / test_config.py: Pipeline pieces in isolation
- test_login.py, test_create_book.py, test_update_book.py,
  test_delete_book.py, test_error_handling.py: End-to-end scenarios

Running Tests:
    # Against the in-process stand-in service (default)
    pytest

    # Against a running server
    API_TARGET=live BASE_URL=http://localhost:3000 AUTH_PASSWORD=... pytest

    # Run specific file
    pytest tests/test_create_book.py
"""
