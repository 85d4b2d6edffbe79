import json


def api_response(
    status_code: int,
    body: dict | list | None = None,
    headers: dict[str, str] | None = None,
) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    response_headers = {"Content-Type": "application/json"}
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": "" if body is None else json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, **details: object) -> dict:
    """エラーレスポンスを生成する"""
    return api_response(status_code, {"message": message, **details})
