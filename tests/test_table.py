"""
Tests for the table lifecycle handle
"""
from unittest import mock

import pytest
from botocore.client import ClientError
from botocore.exceptions import BotoCoreError

from pynamotable.connection import Connection
from pynamotable.constants import NUMBER, PAY_PER_REQUEST_BILLING_MODE, STRING
from pynamotable.options import with_billing_mode, with_range_key
from pynamotable.table import Table

TABLE_NAME = 'blah'


def client_error(code, operation_name='CreateTable'):
    return ClientError({'Error': {'Code': code, 'Message': 'boom'}}, operation_name)


@pytest.fixture
def client():
    return mock.MagicMock()


def test_create_if_not_exists(client):
    table = Table(TABLE_NAME, client=client)
    assert table.create_if_not_exists('id', STRING) is True
    client.create_table.assert_called_once_with(
        TableName=TABLE_NAME,
        AttributeDefinitions=[{'AttributeName': 'id', 'AttributeType': STRING}],
        KeySchema=[{'AttributeName': 'id', 'KeyType': 'HASH'}],
        BillingMode='PROVISIONED',
        ProvisionedThroughput={'ReadCapacityUnits': 3, 'WriteCapacityUnits': 3},
    )


def test_create_if_not_exists__hash_key_comes_first(client):
    table = Table(TABLE_NAME, client=client)
    table.create_if_not_exists(
        'id', STRING,
        with_range_key('range', NUMBER),
        with_billing_mode(PAY_PER_REQUEST_BILLING_MODE),
    )
    kwargs = client.create_table.call_args[1]
    assert kwargs['KeySchema'] == [
        {'AttributeName': 'id', 'KeyType': 'HASH'},
        {'AttributeName': 'range', 'KeyType': 'RANGE'},
    ]
    assert kwargs['BillingMode'] == PAY_PER_REQUEST_BILLING_MODE
    assert 'ProvisionedThroughput' not in kwargs


def test_create_if_not_exists__already_exists(client):
    client.create_table.side_effect = [None, client_error('ResourceInUseException')]
    table = Table(TABLE_NAME, client=client)
    assert table.create_if_not_exists('id', STRING) is True
    assert table.create_if_not_exists('id', STRING) is False
    assert client.create_table.call_count == 2


@pytest.mark.parametrize('error', [
    client_error('LimitExceededException'),
    client_error('ValidationException'),
    client_error('ResourceNotFoundException'),
    BotoCoreError(),
])
def test_create_if_not_exists__other_errors_propagate(client, error):
    client.create_table.side_effect = error
    table = Table(TABLE_NAME, client=client)
    with pytest.raises(type(error)) as excinfo:
        table.create_if_not_exists('id', STRING)
    assert excinfo.value is error


def test_delete_if_exists(client):
    table = Table(TABLE_NAME, client=client)
    assert table.delete_if_exists() is True
    client.delete_table.assert_called_once_with(TableName=TABLE_NAME)


def test_delete_if_exists__not_found(client):
    client.delete_table.side_effect = client_error('ResourceNotFoundException', 'DeleteTable')
    table = Table(TABLE_NAME, client=client)
    assert table.delete_if_exists() is False


@pytest.mark.parametrize('error', [
    client_error('ResourceInUseException', 'DeleteTable'),
    client_error('AccessDeniedException', 'DeleteTable'),
    BotoCoreError(),
])
def test_delete_if_exists__other_errors_propagate(client, error):
    client.delete_table.side_effect = error
    table = Table(TABLE_NAME, client=client)
    with pytest.raises(type(error)) as excinfo:
        table.delete_if_exists()
    assert excinfo.value is error


def test_client_from_connection(client):
    connection = mock.MagicMock(spec=Connection)
    connection.client = client
    table = Table(TABLE_NAME, connection=connection)
    table.delete_if_exists()
    client.delete_table.assert_called_once_with(TableName=TABLE_NAME)


def test_repr():
    assert repr(Table(TABLE_NAME, client=mock.MagicMock())) == 'Table<blah>'


def test_client_given__no_connection_built(client):
    with mock.patch('pynamotable.table.Connection') as connection_cls:
        table = Table(TABLE_NAME, client=client)
        table.create_if_not_exists('id', STRING)
        table.delete_if_exists()
    connection_cls.assert_not_called()
    assert table.connection is None


def test_connection_built_from_settings_on_first_use(client):
    with mock.patch('pynamotable.table.Connection') as connection_cls:
        connection_cls.return_value.client = client
        table = Table(TABLE_NAME)
        connection_cls.assert_not_called()
        table.delete_if_exists()
        table.delete_if_exists()
    connection_cls.assert_called_once_with()
    assert client.delete_table.call_count == 2
