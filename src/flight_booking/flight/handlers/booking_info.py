from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.get_flight import GetFlightService
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.flight.handlers import dependencies
from flight_booking.flight.handlers.response_models import to_booking_info_data
from flight_booking.shared.domain import ResourceNotFoundException
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

service = GetFlightService(flight_repository=dependencies.flight_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席予約状況取得 Lambda Handler（GET /flights/{flight_id}/booking-info）"""

    path_params = event.path_parameters or {}
    try:
        flight_id = FlightId(value=int(path_params.get("flight_id", "")))
    except ValueError:
        return error_response(400, "flight_id must be a positive integer")

    logger.info("Fetching booking info", extra={"flight_id": flight_id.value})

    try:
        flight = service.get(flight_id)
    except ResourceNotFoundException as e:
        return error_response(404, str(e))

    return api_response(200, to_booking_info_data(flight).model_dump(mode="json"))
