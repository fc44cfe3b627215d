import json

from pydantic import ValidationError

from hotel_search.shared.domain.exception import (
    DomainException,
    DuplicateResourceException,
    NullArgumentException,
    ResourceNotFoundException,
    ValidationException,
)


def api_response(status_code: int, body: dict | None = None) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    response: dict = {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
    }
    if body is not None:
        response["body"] = json.dumps(body, default=str)
    return response


_STATUS_BY_EXCEPTION: tuple[tuple[type[Exception], int, str], ...] = (
    (ResourceNotFoundException, 404, "Resource not found"),
    (DuplicateResourceException, 409, "Duplicate hotel"),
    (ValidationException, 400, "Invalid request"),
    (NullArgumentException, 400, "Invalid request"),
)


def error_response(error: DomainException | ValidationError) -> dict:
    """ドメイン例外・入力検証エラーを HTTP レスポンスに変換する

    想定外の例外はここに渡さず、ハンドラ側で 500 として扱う。
    """
    if isinstance(error, ValidationError):
        details = [
            {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
            for e in error.errors()
        ]
        return api_response(400, {"title": "Invalid request", "errors": details})

    for exception_type, status_code, title in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return api_response(status_code, {"title": title, "message": str(error)})
    return api_response(500, {"message": "Internal server error"})
