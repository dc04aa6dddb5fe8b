# ============================================================================
# File: ingestion/runner.py
# Description: Orchestrates one S3 → DynamoDB ingestion with SNS outcome
# ============================================================================
"""
ETL Runner - Orchestrates fetch, parse, write and notify for one S3 object.

This module provides:
- Fatal vs. row-level error separation
- Partial failure support (a failing row never stops the batch)
- Exactly one outcome notification per invocation
- Notification failures isolated from the reported outcome
"""

from typing import Any, Dict, List, Sequence
import json
import logging

from pydantic import ValidationError as PydanticValidationError

from ingestion.extractors.s3_extractor import S3Extractor
from ingestion.loaders.dynamodb_loader import DynamoDBLoader
from ingestion.notifiers.sns_notifier import (
    SNSNotifier,
    build_failure_message,
    build_success_message,
)
from ingestion.transformers.row_parser import parse_headers, parse_row, split_lines
from schemas.events import S3Event, S3ObjectLocation
from schemas.outcome import InvocationResult, ProcessingOutcome
from schemas.records import RowRecord
from core.exceptions import ETLException, EventParseError

logger = logging.getLogger(__name__)


class ETLRunner:
    """
    CSV ingestion orchestrator

    Responsibilities:
    - Resolve the object location from the trigger event
    - Fetch → parse → write every data line, sequentially
    - Collect row errors without aborting the batch
    - Send exactly one success or failure notification
    """

    def __init__(
        self,
        extractor: S3Extractor,
        loader: DynamoDBLoader,
        notifier: SNSNotifier
    ):
        self.extractor = extractor
        self.loader = loader
        self.notifier = notifier

    async def run(self, event: Dict[str, Any]) -> InvocationResult:
        """
        Run the pipeline for one S3 event.

        Pipeline phases:
        1. Locate - Read bucket and decoded key from the event
        2. Extract - Fetch and decode the object
        3. Transform/Load - Parse and write each data line
        4. Notify - Publish the outcome

        Args:
            event: S3 event notification payload

        Returns:
            InvocationResult with status 200, processed and error counts

        Raises:
            ExtractionError: If the event is malformed or the object
                cannot be fetched (after the failure notification)
            DataFormatError: If the object is not UTF-8 text (after the
                failure notification)
        """
        logger.info(f"Event received: {json.dumps(event, indent=2, default=str)}")

        outcome = ProcessingOutcome()

        try:
            # --------------------------------------------------
            # PHASE 1: LOCATE
            # --------------------------------------------------
            location = self._locate(event)
            outcome.bucket = location.bucket
            outcome.key = location.key

            # --------------------------------------------------
            # PHASE 2: EXTRACTION
            # --------------------------------------------------
            text = await self.extractor.fetch_text(location)

            # --------------------------------------------------
            # PHASE 3: TRANSFORM + LOAD
            # --------------------------------------------------
            await self._process_rows(split_lines(text), location, outcome)

        except Exception as e:
            outcome.fatal_error = str(e)
            logger.error(
                f"Fatal error processing CSV: {e}",
                exc_info=True,
                extra={"error_context": e.to_dict() if isinstance(e, ETLException) else {}}
            )

            # Re-raised even if the notification fails
            await self._send(*build_failure_message(outcome))
            raise

        # --------------------------------------------------
        # PHASE 4: NOTIFY
        # --------------------------------------------------
        await self._send(*build_success_message(outcome))

        logger.info(
            f"Run completed: {outcome.status.value} - "
            f"Processed: {outcome.processed}, Errors: {outcome.error_count}"
        )

        return InvocationResult.from_outcome(outcome)

    def _locate(self, event: Dict[str, Any]) -> S3ObjectLocation:
        try:
            return S3Event.model_validate(event).location()
        except PydanticValidationError as e:
            records = event.get("Records") if isinstance(event, dict) else None
            raise EventParseError(
                "Event does not contain an S3 object record",
                context={"record_count": len(records) if isinstance(records, list) else 0},
                original_exception=e
            )

    async def _process_rows(
        self,
        lines: List[str],
        location: S3ObjectLocation,
        outcome: ProcessingOutcome
    ) -> None:
        if not lines:
            # Empty object: nothing to write, reported as a successful no-op
            logger.warning(f"No lines found in {location.uri}; nothing to process")
            return

        headers = parse_headers(lines[0])
        data_lines = lines[1:]

        logger.info(f"CSV Headers: {', '.join(headers)}")
        logger.info(f"Total rows to process: {len(data_lines)}")

        for index, line in enumerate(data_lines, start=1):
            try:
                await self._process_row(headers, line, location)
                outcome.record_success()
            except Exception as e:
                message = f"Error processing row {index}: {e}"
                logger.error(
                    message,
                    extra={"error_context": e.to_dict() if isinstance(e, ETLException) else {}}
                )
                outcome.record_error(message)

    async def _process_row(
        self,
        headers: Sequence[str],
        line: str,
        location: S3ObjectLocation
    ) -> None:
        row = RowRecord(fields=parse_row(headers, line), source_file=location.key)
        await self.loader.write(row)
        logger.info(f"Processed record: {row.fields.get('customerId') or 'unknown'}")

    async def _send(self, subject: str, body: str) -> None:
        """Publish a notification; failures are logged and swallowed"""
        try:
            await self.notifier.notify(subject, body)
        except Exception as e:
            logger.error(
                f"Failed to send notification '{subject}': {e}",
                extra={"error_context": e.to_dict() if isinstance(e, ETLException) else {}}
            )
