"""
アプリケーション例外
Managers raise these; main.py turns them into JSON error responses.
"""
from fastapi import status


class AppError(Exception):
    """Base error carrying a user-facing message and an HTTP status code"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(AppError):
    """参照先の Problem / Topic が存在しない"""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(AppError):
    """解答形式の不正、または topicId と order の重複"""

    status_code = status.HTTP_400_BAD_REQUEST
