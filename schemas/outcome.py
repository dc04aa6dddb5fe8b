"""
Schemas for the per-invocation processing outcome and the Lambda response
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime, timezone
import enum
import json


class ETLStatus(str, enum.Enum):
    """Invocation status"""
    SUCCESS = "success"
    PARTIAL = "partial_success"
    FAILED = "failed"


class ProcessingOutcome(BaseModel):
    """
    Accumulated result of one invocation.

    Owned by a single ETLRunner.run() call; errors are append-only.
    """
    bucket: Optional[str] = None
    key: Optional[str] = None
    processed: int = 0
    errors: List[str] = Field(default_factory=list)
    fatal_error: Optional[str] = None
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def record_success(self) -> None:
        self.processed += 1

    def record_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def attempted(self) -> int:
        return self.processed + self.error_count

    @property
    def status(self) -> ETLStatus:
        if self.fatal_error is not None:
            return ETLStatus.FAILED
        if self.errors:
            return ETLStatus.PARTIAL
        return ETLStatus.SUCCESS


class InvocationResult(BaseModel):
    """Response returned to the Lambda runtime on success"""
    statusCode: int = 200
    body: str

    @classmethod
    def from_outcome(cls, outcome: ProcessingOutcome) -> "InvocationResult":
        return cls(
            statusCode=200,
            body=json.dumps({
                "message": "Processing complete",
                "recordsProcessed": outcome.processed,
                "errors": outcome.error_count
            })
        )

    @property
    def payload(self) -> dict:
        return json.loads(self.body)
