from pikaia.config.resolvers import register_resolvers
from pikaia.config.validation import (
    ConfigIssue,
    ConfigResult,
    ErrorCode,
    validate_config,
)

__all__ = [
    "ConfigIssue",
    "ConfigResult",
    "ErrorCode",
    "register_resolvers",
    "validate_config",
]
