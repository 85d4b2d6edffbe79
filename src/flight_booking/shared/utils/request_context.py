from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2

from flight_booking.shared.domain import UserId


def authenticated_user_id(event: APIGatewayProxyEventV2) -> UserId | None:
    """Lambda Authorizer が解決したユーザーIDを取り出す

    認証は上流の Authorizer の責務。コンテキストが無い、または不正な値の場合は None。
    """
    request_context = event.raw_event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    user_id = (authorizer.get("lambda") or {}).get("user_id")
    if user_id is None:
        return None

    try:
        return UserId(value=int(user_id))
    except (TypeError, ValueError):
        return None
