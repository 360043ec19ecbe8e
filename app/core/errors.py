from fastapi import status


class ApiError(Exception):
    """Base error rendered as {"error": message} with its status code"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class DuplicateEntry(ApiError):
    # A client mistake, not a server fault
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "This entry already exists. Invalid."):
        super().__init__(message)
