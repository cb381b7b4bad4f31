import os

import boto3
import pytest

# The persistence gateway refuses to import without a connection string
os.environ.setdefault("DYNAMODB_ENDPOINT_URL", "http://dynamodb-local:8000")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "fake")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "fake")

from scripts.init_dynamodb import create_table_if_not_exists, delete_table  # noqa: E402
from tests.fakes import FakeDynamoDB  # noqa: E402

TEST_TABLE_NAME = "DevEvent_Test"

RUN_INTEGRATION = os.getenv("DYNAMODB_INTEGRATION", "").lower() in {"1", "true", "yes"}


@pytest.fixture
def dynamodb_resource():
    """Fresh in-memory DynamoDB resource for each test"""
    return FakeDynamoDB()


@pytest.fixture(scope="session")
def dynamodb_table():
    """Create the test table on dynamodb-local for the session"""
    if not RUN_INTEGRATION:
        pytest.skip("set DYNAMODB_INTEGRATION=1 to run against dynamodb-local")

    table = create_table_if_not_exists(TEST_TABLE_NAME)

    yield table

    # Cleanup: Delete test table
    delete_table(TEST_TABLE_NAME)


@pytest.fixture
def live_dynamodb_resource(dynamodb_table):
    """Real DynamoDB resource with an emptied test table"""
    resource = boto3.resource(
        "dynamodb",
        endpoint_url=os.environ["DYNAMODB_ENDPOINT_URL"],
        region_name=os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID", "fake"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", "fake"),
    )

    # Scan and delete all items
    table = resource.Table(TEST_TABLE_NAME)
    scan_kwargs = {}
    while True:
        response = table.scan(**scan_kwargs)
        for item in response.get("Items", []):
            table.delete_item(Key={"PK": item["PK"], "SK": item["SK"]})
        if "LastEvaluatedKey" not in response:
            break
        scan_kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]

    return resource


@pytest.fixture
def valid_event_data():
    """Valid event data before normalization"""
    return {
        "title": "  My Cool Talk!!  ",
        "description": "A deep dive into async Python",
        "overview": "Talk plus live coding",
        "image": "https://cdn.example.com/DevEvent/talk.png",
        "venue": "Main Hall",
        "location": "Berlin, DE",
        "date": "2025-12-01T23:00:00-05:00",
        "time": "9:30",
        "mode": "hybrid",
        "audience": "Backend developers",
        "agenda": ["Intro", "Live coding", "Q&A"],
        "organizer": "PyBerlin",
        "tags": ["python", "asyncio"],
    }
