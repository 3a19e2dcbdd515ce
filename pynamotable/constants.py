"""
PynamoTable constants
"""

# Operations
CREATE_TABLE = 'CreateTable'
DELETE_TABLE = 'DeleteTable'

# Request Parameters
ATTR_DEFINITIONS = 'AttributeDefinitions'
TABLE_NAME = 'TableName'
KEY_SCHEMA = 'KeySchema'
ATTR_NAME = 'AttributeName'
ATTR_TYPE = 'AttributeType'
INDEX_NAME = 'IndexName'
KEY_TYPE = 'KeyType'
TAGS = 'Tags'
KEY = 'Key'
VALUE = 'Value'

# Key Types
HASH = 'HASH'
RANGE = 'RANGE'

# Billing Modes
PAY_PER_REQUEST_BILLING_MODE = 'PAY_PER_REQUEST'
PROVISIONED_BILLING_MODE = 'PROVISIONED'
AVAILABLE_BILLING_MODES = [PROVISIONED_BILLING_MODE, PAY_PER_REQUEST_BILLING_MODE]

# Defaults
DEFAULT_REGION = 'us-east-1'
SERVICE_NAME = 'dynamodb'
DEFAULT_BILLING_MODE = PROVISIONED_BILLING_MODE
DEFAULT_READ_CAPACITY = 3
DEFAULT_WRITE_CAPACITY = 3

# Create Table arguments
PROVISIONED_THROUGHPUT = 'ProvisionedThroughput'
READ_CAPACITY_UNITS = 'ReadCapacityUnits'
WRITE_CAPACITY_UNITS = 'WriteCapacityUnits'
BILLING_MODE = 'BillingMode'

# Scalar Attribute Types
BINARY = 'B'
NUMBER = 'N'
STRING = 'S'

SCALAR_ATTRIBUTE_TYPES = [BINARY, NUMBER, STRING]

# Constants needed for creating indexes
LOCAL_SECONDARY_INDEXES = 'LocalSecondaryIndexes'
GLOBAL_SECONDARY_INDEXES = 'GlobalSecondaryIndexes'
PROJECTION = 'Projection'
PROJECTION_TYPE = 'ProjectionType'
NON_KEY_ATTRIBUTES = 'NonKeyAttributes'
KEYS_ONLY = 'KEYS_ONLY'
ALL = 'ALL'
INCLUDE = 'INCLUDE'
PROJECTION_TYPES = [KEYS_ONLY, ALL, INCLUDE]

# Constants for Dynamodb Streams
STREAM_VIEW_TYPE = 'StreamViewType'
STREAM_SPECIFICATION = 'StreamSpecification'
STREAM_ENABLED = 'StreamEnabled'
STREAM_NEW_IMAGE = 'NEW_IMAGE'
STREAM_OLD_IMAGE = 'OLD_IMAGE'
STREAM_NEW_AND_OLD_IMAGE = 'NEW_AND_OLD_IMAGES'
STREAM_KEYS_ONLY = 'KEYS_ONLY'
STREAM_VIEW_TYPES = [STREAM_KEYS_ONLY, STREAM_NEW_IMAGE, STREAM_OLD_IMAGE, STREAM_NEW_AND_OLD_IMAGE]

# Error codes which make the lifecycle operations idempotent
# See: https://docs.aws.amazon.com/amazondynamodb/latest/APIReference/API_CreateTable.html#API_CreateTable_Errors
RESOURCE_IN_USE = 'ResourceInUseException'
RESOURCE_NOT_FOUND = 'ResourceNotFoundException'
