from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flight_booking.flight.applications.make_booking import MakeBookingService
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.flight.handlers import dependencies
from flight_booking.flight.handlers.request_models import MakeBookingRequest
from flight_booking.flight.handlers.response_models import to_booking_created_data
from flight_booking.shared.domain import BookingException, ResourceNotFoundException
from flight_booking.shared.utils import (
    api_response,
    authenticated_user_id,
    error_response,
)

logger = Logger()

service = MakeBookingService(
    flight_repository=dependencies.flight_repository,
    user_repository=dependencies.user_repository,
    locks=dependencies.flight_locks,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席予約 Lambda Handler（POST /bookings）"""

    user_id = authenticated_user_id(event)
    if user_id is None:
        return error_response(401, "Not authenticated")

    try:
        request = MakeBookingRequest.model_validate_json(event.decoded_body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid booking request", errors=e.errors())

    logger.info(
        "Received make booking request",
        extra={"flight_id": request.flight_id, "seat_codes": request.seat_codes},
    )

    flight_id = FlightId(value=request.flight_id)
    try:
        booking = service.make(user_id, flight_id, request.seat_codes)
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except BookingException as e:
        logger.info("Booking rejected", extra={"reason": str(e)})
        return error_response(409, str(e), seat_codes=list(e.seat_codes))
    except Exception:
        logger.exception("Failed to make booking")
        return error_response(500, "Internal server error")

    return api_response(
        201,
        to_booking_created_data(booking).model_dump(mode="json"),
        headers={"Location": f"/bookings/{booking.id}"},
    )
