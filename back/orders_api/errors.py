from fastapi import status


class AppError(Exception):
    """Error carrying an HTTP status code and a message safe to show clients."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class ValidationError(AppError):
    def __init__(self, message: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Not authorized"):
        super().__init__(status.HTTP_403_FORBIDDEN, message)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, message)
