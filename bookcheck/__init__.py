"""
Book Library API Checks

Contract-checked end-to-end tests for the Book Library HTTP service.

Package Structure:
- config.py: Test-run configuration using Pydantic Settings
- exceptions.py: Error types raised by the check pipeline
- contracts.py: Contract registry and contract composition
- validation.py: Validates JSON bodies against contracts
- fixtures.py: pytest fixtures (transport, bearer token)
- clients/: Transport, body normalizer and per-endpoint request builders
- schemas/: Pydantic contracts for the service's JSON shapes
- services/: Domain operations (authenticate, book CRUD)
- stub/: In-process stand-in for the Book Library service
- utils/: Helper functions
"""

__version__ = "0.1.0"
