from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを返す

    service_name 省略時は POWERTOOLS_SERVICE_NAME 環境変数が使われる。
    """
    return Logger(service=service_name)
