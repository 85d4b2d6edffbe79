from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.get_bookings import BookingQueryService
from flight_booking.flight.handlers import dependencies
from flight_booking.flight.handlers.response_models import to_booking_data
from flight_booking.shared.domain import ResourceNotFoundException
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
    """予約一覧取得 Lambda Handler（GET /bookings）

    出発時刻の昇順で、認証済みユーザー自身の予約のみを返す。
    """

    user_id = authenticated_user_id(event)
    if user_id is None:
        return error_response(401, "Not authenticated")

    logger.info("Listing bookings", extra={"user_id": str(user_id)})

    try:
        bookings = service.list_for_user(user_id)
    except ResourceNotFoundException:
        return error_response(401, "Not authenticated")

    return api_response(
        200,
        [
            to_booking_data(flight, booking).model_dump(mode="json")
            for flight, booking in bookings
        ],
    )
