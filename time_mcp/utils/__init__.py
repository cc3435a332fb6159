from .logging_config import configure_logging
from .response import (
    ResponseEnvelope,
    TextItem,
    error_response,
    is_success,
    success_response,
)

__all__ = [
    'configure_logging',
    'ResponseEnvelope',
    'TextItem',
    'error_response',
    'is_success',
    'success_response',
]
