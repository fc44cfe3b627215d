from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_search.hotel.domain.value_object import HotelId
from hotel_search.hotel.handlers.dependencies import get_hotel_service
from hotel_search.hotel.handlers.error_handling import handle_errors
from hotel_search.shared.utils import api_response

logger = Logger()

service = get_hotel_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル削除 Lambda ハンドラ"""
    path_params = event.path_parameters or {}
    hotel_id = path_params.get("hotel_id")

    if not hotel_id:
        return api_response(400, {"message": "hotel_id is required"})

    logger.info("Received delete hotel request", extra={"hotel_id": hotel_id})

    service.delete(HotelId(value=hotel_id))
    return api_response(204)
