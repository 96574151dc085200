"""Shared utilities: logging and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.logging import setup_logging
from app.shared.utils import ensure_utc, generate_uuid, utc_now

__all__ = [
    "setup_logging",
    "generate_uuid",
    "utc_now",
    "ensure_utc",
]
