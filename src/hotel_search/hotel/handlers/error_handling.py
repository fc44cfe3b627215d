from functools import wraps
from typing import Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from hotel_search.shared.domain.exception import DomainException, StoreException
from hotel_search.shared.utils import api_response, error_response

logger = Logger()


def handle_errors(handler: Callable[..., dict]) -> Callable[..., dict]:
    """ドメイン例外を HTTP ステータスに変換する

    - NotFound → 404, Duplicate → 409, 入力検証エラー → 400
    - それ以外は 500（詳細はログのみに出力する）
    """

    @wraps(handler)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return handler(*args, **kwargs)
        except StoreException:
            logger.exception("Hotel store failure")
            return api_response(500, {"message": "Internal server error"})
        except (DomainException, ValidationError) as e:
            logger.info("Request rejected", extra={"reason": str(e)})
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error")
            return api_response(500, {"message": "Internal server error"})

    return wrapper
