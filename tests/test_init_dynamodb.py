from scripts.init_dynamodb import table_schema


def test_table_schema_declares_single_table_keys():
    schema = table_schema("DevEvent_Test")

    assert schema["TableName"] == "DevEvent_Test"
    assert schema["KeySchema"] == [
        {"AttributeName": "PK", "KeyType": "HASH"},
        {"AttributeName": "SK", "KeyType": "RANGE"},
    ]


def test_table_schema_indexes_match_service_queries():
    schema = table_schema()

    indexes = {index["IndexName"]: index for index in schema["GlobalSecondaryIndexes"]}
    assert set(indexes) == {"GSI_EventsByCreatedAt", "GSI_BookingsByEvent"}

    defined = {a["AttributeName"] for a in schema["AttributeDefinitions"]}
    for index in indexes.values():
        for key in index["KeySchema"]:
            assert key["AttributeName"] in defined
