"""
Service layer for page views
"""
from .base import BaseService
from .resolver import ViewResolver

__all__ = [
    'BaseService',
    'ViewResolver',
]
