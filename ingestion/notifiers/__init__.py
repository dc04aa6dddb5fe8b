from ingestion.notifiers.sns_notifier import (
    SNSNotifier,
    build_failure_message,
    build_success_message,
)

__all__ = ["SNSNotifier", "build_failure_message", "build_success_message"]
