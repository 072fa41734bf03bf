"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (wcb_privacy.config.validation)
"""

from wcb_privacy.kernel.errors.application import ApplicationError
from wcb_privacy.kernel.errors.base import BaseError
from wcb_privacy.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
