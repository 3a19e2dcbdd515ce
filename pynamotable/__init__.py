"""
PynamoTable
^^^^^^^^^^^

Declarative creation and deletion of a single DynamoDB table.
"""
__version__ = '0.1.0'
