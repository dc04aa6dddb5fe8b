"""
Pydantic schemas for data validation and serialization.

Schemas:
    events: S3 event notification payload and decoded object location
    records: Row record written to DynamoDB
    outcome: Per-invocation processing outcome and Lambda response

Usage:
    from schemas.events import S3Event
    from schemas.records import RowRecord
    from schemas.outcome import ProcessingOutcome, InvocationResult

Example:
    location = S3Event.model_validate(event).location()
    row = RowRecord(fields={"id": "1"}, source_file=location.key)
"""

__all__ = [
    "S3Event",
    "S3ObjectLocation",
    "RowRecord",
    "ProcessingOutcome",
    "InvocationResult",
    "ETLStatus",
]
