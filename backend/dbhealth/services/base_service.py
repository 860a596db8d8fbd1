"""
Base service class.
Services sit between controllers and repositories.
"""

from abc import ABC


class BaseService(ABC):
    """Base service class for all services."""
    pass
