"""
Stand-in Book Library Service

A small FastAPI application that answers the same routes, with the same JSON
bodies and messages, as the real Book Library service. Scenarios run against
it in-process (through fastapi.testclient.TestClient) unless API_TARGET=live.

Package Structure:
- app.py: Application factory and error rendering
- security.py: JWT issue/verify and the bearer-token dependency
- store.py: In-memory book store
- routers/: /auth and /books endpoints
"""

from bookcheck.stub.app import create_app

__all__ = ["create_app"]
