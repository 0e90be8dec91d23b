"""
Logging configuration and utilities for the stockchart pipeline.
"""
from .config import configure_logging, get_logger, get_pipeline_logger, log_load_result

__all__ = ["configure_logging", "get_logger", "get_pipeline_logger", "log_load_result"]
