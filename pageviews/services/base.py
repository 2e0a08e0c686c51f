"""
Base service class with common functionality
"""
import time
import logging
from typing import Any

from ..settings import get_pageviews_setting


logger = logging.getLogger(__name__)


class BaseService:
    """Base service class with common utilities"""

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a page views setting"""
        return get_pageviews_setting(key, default)

    def measure_execution_time(self, func, *args, **kwargs) -> tuple[Any, float]:
        """Measure execution time of a function"""
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time
        return result, execution_time

    def log_performance(self, operation: str, execution_time: float, **metadata):
        """Log performance metrics"""
        logger.info(
            f"Performance: {operation} took {execution_time:.3f}s",
            extra={'operation': operation, 'execution_time': execution_time, **metadata}
        )
