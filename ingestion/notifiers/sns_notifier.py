"""
Outcome notifications over SNS.

Builds the human-readable summary for a finished or failed invocation
and publishes it with a single attempt.
"""

import asyncio
from typing import Any, Tuple
import logging

from core.exceptions import NotificationError
from schemas.outcome import ProcessingOutcome
from schemas.records import iso_timestamp

logger = logging.getLogger(__name__)

# SNS rejects subjects longer than 100 characters
MAX_SUBJECT_LENGTH = 100
UNKNOWN = "unknown"


def build_success_message(outcome: ProcessingOutcome) -> Tuple[str, str]:
    """Subject and body for a completed batch (with or without row errors)"""
    lines = [
        "CSV Processing Complete!",
        "",
        f"File: {outcome.key}",
        f"Bucket: {outcome.bucket}",
        f"Records Processed: {outcome.processed}",
        f"Errors: {outcome.error_count}",
        f"Timestamp: {iso_timestamp()}",
        "",
    ]
    if outcome.errors:
        lines.append("Errors encountered:")
        lines.extend(outcome.errors)
    else:
        lines.append("All records processed successfully!")

    return f"CSV Processing: {outcome.key}", "\n".join(lines)


def build_failure_message(outcome: ProcessingOutcome) -> Tuple[str, str]:
    """Subject and body for an invocation that failed before finishing"""
    body = "\n".join([
        f"Error: Fatal error processing CSV: {outcome.fatal_error}",
        f"File: {outcome.key or UNKNOWN}",
        f"Bucket: {outcome.bucket or UNKNOWN}",
    ])
    return "CSV Processing FAILED", body


class SNSNotifier:
    """Publish notifications to one SNS topic"""

    def __init__(self, sns_client: Any, topic_arn: str):
        self.sns = sns_client
        self.topic_arn = topic_arn

    async def notify(self, subject: str, body: str) -> str:
        """
        Publish one message. No retry.

        Returns:
            SNS message id

        Raises:
            NotificationError: If the publish call fails (including an
                empty topic ARN)
        """
        if len(subject) > MAX_SUBJECT_LENGTH:
            subject = subject[:MAX_SUBJECT_LENGTH - 3] + "..."

        try:
            response = await asyncio.to_thread(
                self.sns.publish,
                TopicArn=self.topic_arn,
                Subject=subject,
                Message=body
            )
        except Exception as e:
            raise NotificationError(
                "Failed to publish SNS notification",
                context={"topic_arn": self.topic_arn, "subject": subject},
                original_exception=e
            )

        message_id = (response or {}).get("MessageId", "")
        logger.info(f"SNS notification sent (message_id={message_id})")
        return message_id
