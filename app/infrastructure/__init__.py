"""Infrastructure modules for the RPMS alerting application.

Centralized infrastructure components:
- configuration: Settings management (Settings, SmtpSettings, TwilioSettings)
- logging: Structured logging (get_module_logger, bind_alert_context)
- notifications: Channels, dispatcher and notification service
- operations: Operation results and transport error classification
- services: Dependency injection providers (get_settings, get_notification_service)
"""

# Logging
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Dependency Injection Services
from infrastructure.services import get_settings, get_notification_service

__all__ = [
    # Logging
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Dependency Injection Services
    "get_settings",
    "get_notification_service",
]
