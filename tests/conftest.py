"""
Pytest configuration and fixtures
"""

import io
import pytest
from unittest.mock import Mock

from ingestion.extractors.s3_extractor import S3Extractor
from ingestion.loaders.dynamodb_loader import DynamoDBLoader
from ingestion.notifiers.sns_notifier import SNSNotifier
from ingestion.runner import ETLRunner
from tests.helpers import TEST_TOPIC_ARN, TEST_TABLE, make_s3_event


@pytest.fixture
def s3_event():
    """Event for in/data.csv"""
    return make_s3_event("in/data.csv")


@pytest.fixture
def csv_content():
    """Sample customer CSV"""
    return (
        "customerId,name,email\n"
        "C001,Alice,alice@example.com\n"
        "C002,Bob,bob@example.com\n"
        "C003,Carol,carol@example.com\n"
    )


@pytest.fixture
def mock_s3(csv_content):
    """S3 client returning ``csv_content`` for any object"""
    client = Mock()
    client.get_object.side_effect = lambda **kwargs: {
        "Body": io.BytesIO(csv_content.encode("utf-8"))
    }
    return client


@pytest.fixture
def mock_table():
    """DynamoDB Table resource accepting every put_item"""
    table = Mock()
    table.name = TEST_TABLE
    table.put_item.return_value = {}
    return table


@pytest.fixture
def mock_sns():
    """SNS client accepting every publish"""
    client = Mock()
    client.publish.return_value = {"MessageId": "msg-0001"}
    return client


@pytest.fixture
def runner(mock_s3, mock_table, mock_sns):
    """Runner wired with mock clients"""
    return ETLRunner(
        extractor=S3Extractor(mock_s3),
        loader=DynamoDBLoader(mock_table),
        notifier=SNSNotifier(mock_sns, TEST_TOPIC_ARN)
    )
