# stayvista/core/exceptions.py
from typing import Any, Optional


class StayVistaError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)


class Unauthorized(StayVistaError):
    status_code = 401
    message = "unauthorized access"


class Forbidden(StayVistaError):
    status_code = 403
    message = "forbidden access"


class NotFound(StayVistaError):
    status_code = 404
    message = "Not found"


class ValidationError(StayVistaError):
    status_code = 400
    message = "Invalid input"


class Conflict(ValidationError):
    status_code = 409
    message = "Conflict"


class UpstreamFailure(StayVistaError):
    status_code = 502
    message = "Upstream service failed"
