"""
Tests for the Lambda entry point wiring
"""

import io
import json
import pytest
from unittest.mock import Mock, patch

from handlers import csv_upload
from tests.helpers import TEST_TABLE, make_s3_event


@pytest.fixture
def patched_clients(mock_table, mock_sns):
    s3 = Mock()
    s3.get_object.return_value = {"Body": io.BytesIO(b"customerId,name\nC001,Alice\n")}

    with patch.object(csv_upload, "get_s3_client", return_value=s3), \
            patch.object(csv_upload, "get_dynamodb_table", return_value=mock_table) as get_table, \
            patch.object(csv_upload, "get_sns_client", return_value=mock_sns):
        yield s3, get_table


def test_lambda_handler_returns_response(patched_clients, mock_table):
    context = Mock(aws_request_id="req-123")

    response = csv_upload.lambda_handler(make_s3_event("in/data.csv"), context)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "message": "Processing complete",
        "recordsProcessed": 1,
        "errors": 0
    }
    assert mock_table.put_item.call_count == 1


def test_lambda_handler_uses_configured_table_and_topic(patched_clients, mock_sns):
    _, get_table = patched_clients

    with patch.object(csv_upload.settings, "DYNAMODB_TABLE", TEST_TABLE), \
            patch.object(csv_upload.settings, "SNS_TOPIC_ARN", "arn:aws:sns:eu-west-1:1:topic"):
        csv_upload.lambda_handler(make_s3_event("in/data.csv"), None)

    get_table.assert_called_once_with(TEST_TABLE)
    assert mock_sns.publish.call_args.kwargs["TopicArn"] == "arn:aws:sns:eu-west-1:1:topic"


def test_lambda_handler_propagates_fatal_errors(patched_clients):
    s3, _ = patched_clients
    s3.get_object.side_effect = Exception("NoSuchKey")

    with pytest.raises(Exception, match="NoSuchKey"):
        csv_upload.lambda_handler(make_s3_event("in/missing.csv"), None)
