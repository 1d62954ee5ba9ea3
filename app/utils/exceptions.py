from litestar.exceptions import ClientException
from litestar.status_codes import HTTP_409_CONFLICT


class ConflictException(ClientException):
    """Request clashes with the current state of a record."""

    status_code = HTTP_409_CONFLICT
