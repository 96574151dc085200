"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IUserRecord, IUserRepository
from app.application.interfaces.services import IAuthSecurity

__all__ = [
    "IAuthSecurity",
    "IUserRecord",
    "IUserRepository",
]
