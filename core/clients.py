"""
Process-wide AWS clients.

Clients are created lazily on first use and reused across warm Lambda
invocations. Only the composition points (the Lambda handler and the
local runner script) call these; pipeline classes receive clients
through their constructors.
"""

from functools import lru_cache
from typing import Any, Dict
import logging

import boto3

from core.config import settings

logger = logging.getLogger(__name__)


def _session_kwargs() -> Dict[str, str]:
    kwargs: Dict[str, str] = {}
    if settings.AWS_REGION:
        kwargs["region_name"] = settings.AWS_REGION
    return kwargs


@lru_cache(maxsize=None)
def get_s3_client() -> Any:
    """Get shared S3 client"""
    logger.debug("Creating S3 client")
    return boto3.client("s3", **_session_kwargs())


@lru_cache(maxsize=None)
def get_dynamodb_table(table_name: str) -> Any:
    """Get shared DynamoDB Table resource for ``table_name``"""
    logger.debug(f"Creating DynamoDB table resource for {table_name}")
    return boto3.resource("dynamodb", **_session_kwargs()).Table(table_name)


@lru_cache(maxsize=None)
def get_sns_client() -> Any:
    """Get shared SNS client"""
    logger.debug("Creating SNS client")
    return boto3.client("sns", **_session_kwargs())
