"""
Shared test helpers
"""

TEST_BUCKET = "customer-uploads"
TEST_TABLE = "CustomerData"
TEST_TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:csv-processing"


def make_s3_event(key: str, bucket: str = TEST_BUCKET) -> dict:
    """Build an S3 ObjectCreated event with an already-encoded key"""
    return {
        "Records": [
            {
                "eventVersion": "2.1",
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
                    "object": {"key": key, "size": 128}
                }
            }
        ]
    }


def written_items(table) -> list:
    """Items passed to put_item, in call order"""
    return [c.kwargs["Item"] for c in table.put_item.call_args_list]


def published(sns) -> list:
    """(subject, message) pairs passed to publish, in call order"""
    return [(c.kwargs["Subject"], c.kwargs["Message"]) for c in sns.publish.call_args_list]
