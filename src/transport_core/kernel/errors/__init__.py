"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── LoggerPanicError
    │   └── LoggerNotInstalledError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
            └── RecordDecodeError
"""

from transport_core.kernel.errors.application import (
    ApplicationError,
    LoggerNotInstalledError,
    LoggerPanicError,
)
from transport_core.kernel.errors.base import BaseError
from transport_core.kernel.errors.infrastructure import (
    InfrastructureError,
    RecordDecodeError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "LoggerNotInstalledError",
    "LoggerPanicError",
    "RecordDecodeError",
    "SerializationError",
]
