import boto3
from botocore.exceptions import ClientError
import time
import os

DEFAULT_TABLE_NAME = os.getenv("DYNAMODB_TABLE_NAME", "DevEvent")

GSI_KEYS = {
    "GSI_EventsByCreatedAt": ("GSI_EventsByCreatedAt_PK", "GSI_EventsByCreatedAt_SK"),
    "GSI_BookingsByEvent": ("GSI_BookingsByEvent_PK", "GSI_BookingsByEvent_SK"),
}


def get_dynamodb_resource():
    return boto3.resource(
        "dynamodb",
        endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000"),
        region_name=os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID", "fake"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", "fake"),
    )


def table_schema(table_name=DEFAULT_TABLE_NAME):
    """Keyword arguments for ``create_table`` describing the single table"""
    attribute_names = ["PK", "SK"]
    indexes = []
    for index_name, (pk_attr, sk_attr) in GSI_KEYS.items():
        attribute_names.extend([pk_attr, sk_attr])
        indexes.append(
            {
                "IndexName": index_name,
                "KeySchema": [
                    {"AttributeName": pk_attr, "KeyType": "HASH"},
                    {"AttributeName": sk_attr, "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            }
        )

    return {
        "TableName": table_name,
        "KeySchema": [
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": name, "AttributeType": "S"} for name in attribute_names
        ],
        "BillingMode": "PAY_PER_REQUEST",
        "GlobalSecondaryIndexes": indexes,
    }


def create_table_if_not_exists(table_name=DEFAULT_TABLE_NAME, dynamodb=None):
    """Create the DynamoDB table with its GSIs if it doesn't exist"""
    dynamodb = dynamodb or get_dynamodb_resource()

    try:
        # Check if table exists
        table = dynamodb.Table(table_name)
        table.table_status
        print(f"Table {table_name} already exists")
        return table
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise

    table = dynamodb.create_table(**table_schema(table_name))

    print(f"Creating table {table_name}...")
    table.wait_until_exists()

    print("Waiting for GSIs to be active...")
    while True:
        table.reload()
        gsi_statuses = [gsi["IndexStatus"] for gsi in table.global_secondary_indexes]
        if all(status == "ACTIVE" for status in gsi_statuses):
            break
        time.sleep(1)

    print(f"Table {table_name} created successfully")
    return table


def delete_table(table_name=DEFAULT_TABLE_NAME, dynamodb=None):
    """Delete DynamoDB table"""
    dynamodb = dynamodb or get_dynamodb_resource()

    try:
        table = dynamodb.Table(table_name)
        table.delete()
        table.wait_until_not_exists()
        print(f"Table {table_name} deleted successfully")
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise
        print(f"Table {table_name} does not exist")


if __name__ == "__main__":
    create_table_if_not_exists()
