"""
API 에러 타입 모음.

모든 에러 응답은 ``{"error": "<message>"}`` 형태의 JSON 하나로 통일합니다.
서비스/의존성 계층은 아래 예외를 raise 하고, 응답 변환은 main.py에 등록된
exception handler가 담당합니다.
"""
from fastapi import status


class APIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, headers: dict[str, str] | None = None):
        if message is not None:
            self.message = message
        self.headers = headers
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class BadRequest(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthMissing(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Missing basic token"


class AuthInvalid(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized request"


class NotFound(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ArticleNotFound(NotFound):
    message = "Article doesn't exist"


class CommentNotFound(NotFound):
    message = "Comment doesn't exist"
