"""
Script to run the CSV ingestion pipeline locally for one S3 object
"""

import argparse
import asyncio
import sys
import os
import json
import logging
from urllib.parse import quote_plus

# Add current directory to path to allow imports from core, ingestion, etc.
sys.path.append(os.getcwd())

from core.logging import setup_logging
from handlers.csv_upload import build_runner

logger = logging.getLogger(__name__)


def build_event(bucket: str, key: str) -> dict:
    """Build a minimal S3 ObjectCreated event for ``bucket``/``key``"""
    return {
        "Records": [
            {
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "bucket": {"name": bucket},
                    # Keys in real events are form-encoded
                    "object": {"key": quote_plus(key, safe="/")}
                }
            }
        ]
    }


async def run_etl(bucket: str, key: str):
    """Run the pipeline against a real bucket, table and topic"""
    runner = build_runner()
    result = await runner.run(build_event(bucket, key))
    logger.info(f"ETL completed for s3://{bucket}/{key}: {json.dumps(result.payload)}")


def main():
    parser = argparse.ArgumentParser(description="Ingest one CSV object from S3 into DynamoDB")
    parser.add_argument("--bucket", required=True, help="Source bucket name")
    parser.add_argument("--key", required=True, help="Object key (unencoded)")
    args = parser.parse_args()

    setup_logging()

    try:
        asyncio.run(run_etl(args.bucket, args.key))
    except Exception as e:
        logger.error(f"ETL pipeline error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
