from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Request-level failure reported to the caller with its error code"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; the caller only sees a generic message"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        super().__init__(base_error.message)
