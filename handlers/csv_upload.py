"""
Lambda handler for CSV uploads to S3.

Configure the function handler as ``handlers.csv_upload.lambda_handler``
and subscribe it to the bucket's ObjectCreated events.
"""

import asyncio
from typing import Any, Dict
import logging

from core.clients import get_dynamodb_table, get_s3_client, get_sns_client
from core.config import settings
from core.logging import setup_logging
from ingestion.extractors.s3_extractor import S3Extractor
from ingestion.loaders.dynamodb_loader import DynamoDBLoader
from ingestion.notifiers.sns_notifier import SNSNotifier
from ingestion.runner import ETLRunner

setup_logging()
logger = logging.getLogger(__name__)


def build_runner() -> ETLRunner:
    """Wire the runner with the process-wide AWS clients"""
    return ETLRunner(
        extractor=S3Extractor(get_s3_client()),
        loader=DynamoDBLoader(get_dynamodb_table(settings.DYNAMODB_TABLE)),
        notifier=SNSNotifier(get_sns_client(), settings.SNS_TOPIC_ARN)
    )


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Ingest the uploaded CSV object.

    Returns the success response; fatal errors propagate so the
    invocation is reported as failed.
    """
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        logger.info(f"Invocation {request_id} started")

    result = asyncio.run(build_runner().run(event))
    return result.model_dump()
