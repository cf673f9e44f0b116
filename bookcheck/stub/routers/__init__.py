"""
Stub Routers

- auth.py: POST /auth/login
- books.py: /books CRUD (mutations require a bearer token)
"""

from bookcheck.stub.routers.auth import router as auth_router
from bookcheck.stub.routers.books import router as books_router

__all__ = ["auth_router", "books_router"]
