"""
Custom exceptions for the CSV ingestion pipeline with structured error context.

Each exception carries context information (bucket, key, row index, ...)
that is logged alongside the message and included in notifications.

Exception Hierarchy:
    ETLException (base)
    ├── ExtractionError
    │   ├── EventParseError
    │   └── ObjectFetchError
    ├── TransformationError
    │   └── DataFormatError
    ├── LoadError
    │   └── RecordWriteError
    └── NotificationError

Extraction errors and DataFormatError are fatal for an invocation.
RecordWriteError (and any other error raised while handling a data line)
only fails that row.
NotificationError is logged and never propagated out of the runner.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ETLException(Exception):
    """
    Base exception for all ETL-related errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (bucket, key, row, ...)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

        # Add timestamp to context
        self.context["error_timestamp"] = self.timestamp.isoformat()

        # Chain original exception if provided
        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with the underlying cause, if any."""
        if self.original_exception:
            return f"{self.message}: {self.original_exception}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(ETLException):
    """Base exception for failures before any row is processed."""
    pass


class EventParseError(ExtractionError):
    """
    Exception raised when the trigger event has no usable S3 record.

    Context should include:
        - record_count: Number of records found in the event
    """
    pass


class ObjectFetchError(ExtractionError):
    """
    Exception raised when the S3 object cannot be fetched.

    Context should include:
        - bucket: Bucket name
        - key: Decoded object key
    """
    pass


# ============================================================================
# Transformation Errors
# ============================================================================

class TransformationError(ETLException):
    """Base exception for data transformation failures."""
    pass


class DataFormatError(TransformationError):
    """Object body is not valid UTF-8 text."""
    pass


# ============================================================================
# Load Errors
# ============================================================================

class LoadError(ETLException):
    """Base exception for data loading failures."""
    pass


class RecordWriteError(LoadError):
    """
    Exception raised when a DynamoDB put_item call fails.

    Context should include:
        - table_name: Name of the table
        - source_file: Object key the row came from
    """
    pass


# ============================================================================
# Notification Errors
# ============================================================================

class NotificationError(ETLException):
    """
    Exception raised when publishing to SNS fails.

    Context should include:
        - topic_arn: Destination topic
        - subject: Message subject
    """
    pass
