"""
Presentation層のAPIエラークラス

FastAPI/Pydanticに依存するAPIエラークラス。
ドメインエラーをHTTPレスポンスに変換する。
"""

from typing import Any, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel

from ..domain.exceptions.base import (
    BadRequestError,
    DomainError,
    NotFoundError,
)


class ErrorResponse(BaseModel):
    """
    標準エラーレスポンス

    Attributes:
        status: ステータス（常に"error"）
        code: エラーコード
        message: エラーメッセージ
        details: エラーの詳細情報（オプション）
    """

    status: str = "error"
    code: str
    message: str
    details: Optional[list[dict[str, Any]] | dict[str, Any]] = None


class APIError(HTTPException):
    """
    API エラーの基底クラス

    FastAPIのHTTPExceptionを継承し、ドメインエラーを
    HTTPレスポンスに変換する。
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "internal_server_error"
    error_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[list[dict[str, Any]] | dict[str, Any]] = None,
    ) -> None:
        self.error_message = message or self.error_message
        self.details = details
        super().__init__(status_code=self.status_code, detail=self.error_message)

    def to_response(self) -> ErrorResponse:
        """
        標準エラーレスポンス形式に変換
        """
        return ErrorResponse(
            code=self.error_code, message=self.error_message, details=self.details
        )


def domain_error_to_api_error(domain_error: DomainError) -> APIError:
    """
    ドメインエラーをAPIエラーに変換

    サブクラス（ItemNotFoundError, ValidationError等）は
    継承元のエラー種別のステータスコードになる。

    Args:
        domain_error: ドメイン層のエラー

    Returns:
        APIError: API層のエラー

    Examples:
        >>> from app.domain.exceptions.base import ItemNotFoundError
        >>> api_err = domain_error_to_api_error(ItemNotFoundError(1))
        >>> api_err.status_code
        404
    """
    if isinstance(domain_error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(domain_error, BadRequestError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    api_error = APIError(
        message=domain_error.message,
        details=domain_error.details,
    )
    api_error.status_code = status_code
    api_error.error_code = domain_error.code
    api_error.error_message = domain_error.message

    return api_error
