from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Use case error caused by the caller, rendered with its own status code"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Use case error caused by a backend failure, rendered as 500"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
