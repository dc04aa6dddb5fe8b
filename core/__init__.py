"""
Core utilities and configuration for the CSV ingestion function.

This package provides foundational components used throughout the pipeline:

Modules:
    config: Application configuration and environment variable management
    clients: Lazily created, process-wide AWS clients
    exceptions: Custom exception hierarchy for error handling
    logging: Logging configuration and utilities

Usage:
    from core.config import settings
    from core.clients import get_s3_client, get_dynamodb_table, get_sns_client
    from core.exceptions import ObjectFetchError, RecordWriteError
    from core.logging import setup_logging

Example:
    # Initialize logging
    setup_logging()

    # Get shared clients at the composition point
    s3 = get_s3_client()
    table = get_dynamodb_table(settings.DYNAMODB_TABLE)
"""

__all__ = [
    "settings",
    "setup_logging",
    "get_s3_client",
    "get_dynamodb_table",
    "get_sns_client",
    # Exceptions
    "ETLException",
    "ExtractionError",
    "EventParseError",
    "ObjectFetchError",
    "TransformationError",
    "DataFormatError",
    "LoadError",
    "RecordWriteError",
    "NotificationError",
]
