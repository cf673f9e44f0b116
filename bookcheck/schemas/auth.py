"""Authentication contracts."""

from pydantic import Field, StrictStr

from bookcheck.schemas.common import ContractModel


class LoginRequest(ContractModel):
    """Payload for POST /auth/login."""

    username: StrictStr
    password: StrictStr


class LoginUser(ContractModel):
    """The user block of a successful login. Only username is guaranteed."""

    username: StrictStr


class LoginResponse(ContractModel):
    """200 body for POST /auth/login."""

    message: StrictStr
    token: StrictStr = Field(min_length=1)
    user: LoginUser
