"""
Pipeline components for S3 CSV ingestion.

Modules:
    runner: Orchestrator that drives fetch, parse, write and notify

Subpackages:
    extractors: S3 object fetch and UTF-8 decoding
    transformers: Comma-split row parser
    loaders: DynamoDB record writer
    notifiers: SNS outcome notifications

Architecture:
    One invocation handles one S3 object:

    1. Extract - Fetch the object and decode it (fatal on failure)
    2. Transform - Map every data line onto the header columns
    3. Load - put_item each row; a failing row is recorded, not fatal
    4. Notify - Publish exactly one success or failure summary

Usage:
    from ingestion.extractors import S3Extractor
    from ingestion.loaders import DynamoDBLoader
    from ingestion.notifiers import SNSNotifier
    from ingestion.runner import ETLRunner

Example:
    runner = ETLRunner(
        extractor=S3Extractor(s3_client),
        loader=DynamoDBLoader(table),
        notifier=SNSNotifier(sns_client, topic_arn)
    )
    result = await runner.run(event)

    print(result.payload["recordsProcessed"])
"""

__all__ = [
    "ETLRunner",
    "S3Extractor",
    "DynamoDBLoader",
    "SNSNotifier",
]
