# teambuilder/core/errors.py
"""
Domain errors raised by the services. Routes turn them into HTTPException
with the matching status code; the message is sent back as {"error": ...}.
"""


class TeamBuilderError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(TeamBuilderError):
    status_code = 400


class Unauthorized(TeamBuilderError):
    status_code = 401


class NotFound(TeamBuilderError):
    status_code = 404


class Conflict(TeamBuilderError):
    status_code = 409
