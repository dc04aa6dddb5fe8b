"""
Write row records into DynamoDB, one put_item per row
"""

import asyncio
from typing import Any, Dict
import logging

from core.exceptions import RecordWriteError
from schemas.records import RowRecord, iso_timestamp

logger = logging.getLogger(__name__)


class DynamoDBLoader:
    """
    Load rows into a DynamoDB table.

    Each write is an unconditional put_item: an existing item with the
    same key is replaced (last write wins). No batching, no conditional
    expressions.
    """

    def __init__(self, table: Any):
        self.table = table

    @property
    def table_name(self) -> str:
        return getattr(self.table, "name", "<unknown>")

    async def write(self, row: RowRecord) -> Dict[str, Any]:
        """
        Write one row, stamping the ingestion time.

        Args:
            row: Parsed row with its source object key

        Returns:
            The item that was written

        Raises:
            RecordWriteError: If DynamoDB rejects the item
        """
        item = row.to_item(uploaded_at=iso_timestamp())

        try:
            await asyncio.to_thread(self.table.put_item, Item=item)
        except Exception as e:
            raise RecordWriteError(
                f"Failed to write record to {self.table_name}",
                context={
                    "table_name": self.table_name,
                    "source_file": row.source_file
                },
                original_exception=e
            )

        return item
