from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.cancel_booking import CancelBookingService
from flight_booking.flight.handlers import dependencies
from flight_booking.shared.domain import BookingId, ResourceNotFoundException
from flight_booking.shared.utils import (
    api_response,
    authenticated_user_id,
    error_response,
)

logger = Logger()

service = CancelBookingService(
    flight_repository=dependencies.flight_repository,
    user_repository=dependencies.user_repository,
    locks=dependencies.flight_locks,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler（DELETE /bookings/{booking_id}）"""

    user_id = authenticated_user_id(event)
    if user_id is None:
        return error_response(401, "Not authenticated")

    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking_id")
    if not booking_id:
        return error_response(400, "booking_id is required")

    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    try:
        service.cancel(user_id, BookingId(value=booking_id))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))

    return api_response(204)
