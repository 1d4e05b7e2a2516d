"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
            └── DeliveryError
"""

from notify_relay.kernel.errors.application import ApplicationError
from notify_relay.kernel.errors.base import BaseError
from notify_relay.kernel.errors.domain import DomainError, ValidationError
from notify_relay.kernel.errors.infrastructure import (
    DeliveryError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeliveryError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
    "ValidationError",
]
