import json

import pytest


@pytest.fixture
def create_api_event():
    """API Gateway HTTP API (v2) のイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/",
        user_id: int | None = 1,
        body: dict | None = None,
        path_parameters: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> dict:
        request_context = {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "id.execute-api.ap-northeast-1.amazonaws.com",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "192.0.2.1",
                "userAgent": "pytest",
            },
            "requestId": "request-id",
            "routeKey": f"{method} {path}",
            "stage": "$default",
        }
        if user_id is not None:
            request_context["authorizer"] = {"lambda": {"user_id": user_id}}

        event = {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": request_context,
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = json.dumps(body)
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query is not None:
            event["queryStringParameters"] = query
        return event

    return _factory
