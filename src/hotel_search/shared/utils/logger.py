from aws_lambda_powertools import Logger

SERVICE_NAME = "hotel-search"


def get_logger(service_name: str = SERVICE_NAME) -> Logger:
    return Logger(service=service_name)
