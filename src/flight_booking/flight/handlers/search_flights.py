from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flight_booking.flight.applications.search_flights import (
    FlightSearchCriteria,
    SearchFlightsService,
)
from flight_booking.flight.handlers import dependencies
from flight_booking.flight.handlers.request_models import SearchFlightsRequest
from flight_booking.flight.handlers.response_models import to_flight_data
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

service = SearchFlightsService(flight_repository=dependencies.flight_repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler（GET /flights）"""

    try:
        request = SearchFlightsRequest.model_validate(
            event.query_string_parameters or {}
        )
    except ValidationError as e:
        return error_response(400, "Invalid search query", errors=e.errors())

    logger.info("Searching flights", extra=request.model_dump(mode="json"))

    criteria: FlightSearchCriteria = {
        "origin": request.origin,
        "destination": request.destination,
        "departure_date": request.departure_date,
        "day_range": request.day_range,
    }
    try:
        flights = service.search(criteria)
    except ValueError as e:
        return error_response(400, str(e))

    return api_response(
        200, [to_flight_data(flight).model_dump(mode="json") for flight in flights]
    )
