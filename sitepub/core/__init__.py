"""Core domain types and logic."""

from .config import ConfigurationError, PublishConfig, load_config, validate_for
from .errors import ErrorCode
from .model import LiveTarget, LogResult, PublishLogEntry, PublishTarget, QueueTarget
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "ConfigurationError",
    "PublishConfig",
    "load_config",
    "validate_for",
    # errors
    "ErrorCode",
    # model
    "LiveTarget",
    "LogResult",
    "PublishLogEntry",
    "PublishTarget",
    "QueueTarget",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
