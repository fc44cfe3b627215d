from .cancellation import raise_if_cancelled as raise_if_cancelled
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .logger import get_logger as get_logger
from .validators import to_decimal as to_decimal
