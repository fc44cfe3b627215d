from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_search.hotel.handlers.dependencies import get_hotel_service
from hotel_search.hotel.handlers.error_handling import handle_errors
from hotel_search.hotel.handlers.request_models import SearchHotelsRequest
from hotel_search.hotel.handlers.response_models import to_search_response
from hotel_search.shared.utils import api_response

logger = Logger()

service = get_hotel_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル検索 Lambda ハンドラ"""
    logger.info("Received search hotels request")

    params = event.query_string_parameters or {}
    request = SearchHotelsRequest.model_validate(params)
    result = service.search(request.to_query())
    return api_response(200, to_search_response(result))
