"""Error type rendered as the service's {error, message} JSON body."""


class ServiceError(Exception):
    """
    An error response with the service's body shape.

    Raised from routes and dependencies; app.py turns it into a JSONResponse.
    """

    def __init__(self, status_code: int, error: str, message: str):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(f"{status_code} {error}: {message}")

    def to_body(self) -> dict[str, str]:
        return {"error": self.error, "message": self.message}
