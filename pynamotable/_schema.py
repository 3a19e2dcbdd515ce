import sys
from typing import List

if sys.version_info >= (3, 8):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict

if sys.version_info >= (3, 11):
    from typing import NotRequired
else:
    from typing_extensions import NotRequired


class SchemaAttrDefinition(TypedDict):
    AttributeName: str
    AttributeType: str


class KeySchema(TypedDict):
    AttributeName: str
    KeyType: str


class Projection(TypedDict):
    ProjectionType: str
    NonKeyAttributes: NotRequired[List[str]]


class ProvisionedThroughput(TypedDict):
    ReadCapacityUnits: int
    WriteCapacityUnits: int


class LocalSecondaryIndex(TypedDict):
    IndexName: str
    KeySchema: NotRequired[List[KeySchema]]
    Projection: Projection


class GlobalSecondaryIndex(LocalSecondaryIndex):
    ProvisionedThroughput: NotRequired[ProvisionedThroughput]


class StreamSpecification(TypedDict):
    StreamEnabled: bool
    StreamViewType: str


class Tag(TypedDict):
    Key: str
    Value: str


class CreateTableInput(TypedDict):
    TableName: str
    BillingMode: str
    AttributeDefinitions: NotRequired[List[SchemaAttrDefinition]]
    KeySchema: NotRequired[List[KeySchema]]
    ProvisionedThroughput: NotRequired[ProvisionedThroughput]
    GlobalSecondaryIndexes: NotRequired[List[GlobalSecondaryIndex]]
    LocalSecondaryIndexes: NotRequired[List[LocalSecondaryIndex]]
    StreamSpecification: NotRequired[StreamSpecification]
    Tags: NotRequired[List[Tag]]


class DeleteTableInput(TypedDict):
    TableName: str
