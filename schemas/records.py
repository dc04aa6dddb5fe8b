"""
Row record schema written to DynamoDB
"""

from pydantic import BaseModel, Field
from typing import Dict, Any
from datetime import datetime, timezone

UPLOADED_AT_FIELD = "uploadedAt"
SOURCE_FILE_FIELD = "sourceFile"


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-15T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RowRecord(BaseModel):
    """
    One parsed data line.

    ``fields`` maps every header column to its string value. The source
    object key is kept separately and merged in, together with the
    ingestion timestamp, only when the item is built for writing.
    """
    fields: Dict[str, str] = Field(default_factory=dict)
    source_file: str

    def to_item(self, uploaded_at: str) -> Dict[str, Any]:
        """Build the DynamoDB item; synthesized fields win over same-named columns"""
        item: Dict[str, Any] = dict(self.fields)
        item[UPLOADED_AT_FIELD] = uploaded_at
        item[SOURCE_FILE_FIELD] = self.source_file
        return item
