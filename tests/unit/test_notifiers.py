"""
Unit tests for SNS notifications
"""

import pytest
from unittest.mock import Mock

from core.exceptions import NotificationError
from ingestion.notifiers.sns_notifier import (
    MAX_SUBJECT_LENGTH,
    SNSNotifier,
    build_failure_message,
    build_success_message,
)
from schemas.outcome import ProcessingOutcome


class TestMessages:
    """Test message composition"""

    def test_success_without_errors(self):
        outcome = ProcessingOutcome(bucket="b", key="in/data.csv", processed=2)

        subject, body = build_success_message(outcome)

        assert subject == "CSV Processing: in/data.csv"
        assert "File: in/data.csv" in body
        assert "Bucket: b" in body
        assert "Records Processed: 2" in body
        assert "Errors: 0" in body
        assert "Timestamp: " in body
        assert body.endswith("All records processed successfully!")

    def test_success_lists_row_errors(self):
        outcome = ProcessingOutcome(
            bucket="b",
            key="k.csv",
            processed=1,
            errors=["Error processing row 2: boom"]
        )

        _, body = build_success_message(outcome)

        assert "Errors: 1" in body
        assert "Errors encountered:\nError processing row 2: boom" in body
        assert "All records processed successfully!" not in body

    def test_failure_with_unknown_location(self):
        outcome = ProcessingOutcome(fatal_error="bad event")

        subject, body = build_failure_message(outcome)

        assert subject == "CSV Processing FAILED"
        assert body == (
            "Error: Fatal error processing CSV: bad event\n"
            "File: unknown\n"
            "Bucket: unknown"
        )


class TestSNSNotifier:
    """Test publishing"""

    @pytest.mark.asyncio
    async def test_notify_publishes_once(self, mock_sns):
        notifier = SNSNotifier(mock_sns, "arn:aws:sns:us-east-1:1:t")

        message_id = await notifier.notify("subject", "body")

        assert message_id == "msg-0001"
        mock_sns.publish.assert_called_once_with(
            TopicArn="arn:aws:sns:us-east-1:1:t",
            Subject="subject",
            Message="body"
        )

    @pytest.mark.asyncio
    async def test_long_subject_is_truncated(self, mock_sns):
        notifier = SNSNotifier(mock_sns, "arn")

        await notifier.notify("CSV Processing: " + "k" * 200, "body")

        subject = mock_sns.publish.call_args.kwargs["Subject"]
        assert len(subject) == MAX_SUBJECT_LENGTH
        assert subject.endswith("...")

    @pytest.mark.asyncio
    async def test_publish_failure_is_wrapped_without_retry(self):
        sns = Mock()
        sns.publish.side_effect = Exception("Invalid parameter: TopicArn")

        notifier = SNSNotifier(sns, "")

        with pytest.raises(NotificationError):
            await notifier.notify("subject", "body")

        assert sns.publish.call_count == 1
