from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.get_bookings import BookingQueryService
from flight_booking.flight.handlers import dependencies
from flight_booking.flight.handlers.response_models import to_booking_data
from flight_booking.shared.domain import BookingId, ResourceNotFoundException
from flight_booking.shared.utils import (
    api_response,
    authenticated_user_id,
    error_response,
)

logger = Logger()

service = BookingQueryService(
    flight_repository=dependencies.flight_repository,
    user_repository=dependencies.user_repository,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler（GET /bookings/{booking_id}）"""

    user_id = authenticated_user_id(event)
    if user_id is None:
        return error_response(401, "Not authenticated")

    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking_id")
    if not booking_id:
        return error_response(400, "booking_id is required")

    logger.info("Fetching booking", extra={"booking_id": booking_id})

    try:
        flight, booking = service.get(user_id, BookingId(value=booking_id))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))

    return api_response(200, to_booking_data(flight, booking).model_dump(mode="json"))
