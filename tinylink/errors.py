# tinylink/errors.py
"""Domain errors. Each carries the HTTP status it is answered with."""


class LinkError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidUrl(LinkError):
    status_code = 400
    message = "Invalid URL format"


class InvalidFormat(LinkError):
    status_code = 400
    message = "Code must be 6-8 lowercase alphanumeric characters"


class CodeConflict(LinkError):
    status_code = 409
    message = "Code already exists"


class AllocationExhausted(LinkError):
    status_code = 500
    message = "Failed to generate unique code"


class NotFoundOrForbidden(LinkError):
    status_code = 404
    message = "Link not found or you don't have permission to access it"


class LinkNotFound(LinkError):
    status_code = 404
    message = "Link not found"


class DuplicateCode(LinkError):
    """Raised by the store when an insert hits the unique code constraint."""

    status_code = 409
    message = "Code already exists"
