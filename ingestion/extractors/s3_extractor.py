"""
S3 object extractor: fetch a CSV object and decode it to text
"""

import asyncio
from typing import Any, Union
import logging

from core.exceptions import DataFormatError, ObjectFetchError
from schemas.events import S3ObjectLocation

logger = logging.getLogger(__name__)


def decode_body(body: Union[bytes, Any]) -> str:
    """
    Read a streaming body (or raw bytes) to the end and decode it as UTF-8.

    Raises:
        DataFormatError: If the content is not valid UTF-8
    """
    data = body if isinstance(body, (bytes, bytearray)) else body.read()
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DataFormatError(
            "Object content is not valid UTF-8",
            context={"position": e.start},
            original_exception=e
        )


class S3Extractor:
    """
    Extract the content of one S3 object.

    The S3 client is injected; boto3 calls are blocking and are run in a
    worker thread so the pipeline stays a single sequential coroutine.
    """

    def __init__(self, s3_client: Any):
        self.s3 = s3_client

    async def fetch_text(self, location: S3ObjectLocation) -> str:
        """
        Fetch the object and return its decoded content.

        Raises:
            ObjectFetchError: If the object cannot be read from S3
            DataFormatError: If the object is not UTF-8 text
        """
        logger.info(f"Processing file: {location.uri}")

        try:
            response = await asyncio.to_thread(
                self.s3.get_object,
                Bucket=location.bucket,
                Key=location.key
            )
            data = await asyncio.to_thread(response["Body"].read)
        except Exception as e:
            raise ObjectFetchError(
                f"Failed to fetch {location.uri}",
                context={"bucket": location.bucket, "key": location.key},
                original_exception=e
            )

        text = decode_body(data)
        logger.info(f"Read {len(data)} bytes from {location.uri}")
        return text
