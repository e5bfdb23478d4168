"""Application ports - interfaces for external adapters."""

from advising.application.ports.authorizer import Authorizer
from advising.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Authorizer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
