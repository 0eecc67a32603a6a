"""Structured logging infrastructure.

Centralized logging configuration for the RPMS alerting application using
structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - build_processors(): Processor chain for an environment
    - bind_alert_context(): Context manager for alert-scoped logging
    - get_correlation_id() / clear_alert_context()

Formatters:
    - add_app_info(), mask_sensitive_data(), truncate_large_values()
"""

from infrastructure.logging.setup import (
    build_processors,
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_alert_context,
    get_correlation_id,
    clear_alert_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "build_processors",
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_alert_context",
    "get_correlation_id",
    "clear_alert_context",
    # Formatters
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
