from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_search.hotel.handlers.dependencies import get_hotel_service
from hotel_search.hotel.handlers.error_handling import handle_errors
from hotel_search.hotel.handlers.request_models import CreateHotelRequest
from hotel_search.hotel.handlers.response_models import to_hotel_response
from hotel_search.shared.utils import api_response

logger = Logger()

service = get_hotel_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル登録 Lambda ハンドラ"""
    logger.info("Received create hotel request")

    request = CreateHotelRequest.model_validate_json(event.decoded_body or "")
    hotel = service.create(request.to_details())
    return api_response(201, to_hotel_response(hotel))
