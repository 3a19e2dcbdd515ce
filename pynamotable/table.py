"""
PynamoTable lifecycle handle
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""
import logging
from typing import Any, Optional

from botocore.exceptions import ClientError

from pynamotable._schema import DeleteTableInput
from pynamotable.connection import Connection
from pynamotable.constants import (
    CREATE_TABLE, DELETE_TABLE, RESOURCE_IN_USE, RESOURCE_NOT_FOUND, TABLE_NAME,
)
from pynamotable.options import Option, make_create_table_input, with_hash_key

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


def _error_code(error: ClientError) -> Optional[str]:
    return error.response.get('Error', {}).get('Code')


class Table:
    """
    A single DynamoDB table with idempotent create and delete operations.

    :param table_name: the name of the table
    :param client: anything exposing botocore's ``create_table(**kwargs)`` and
      ``delete_table(**kwargs)``. When omitted, the client of `connection` is used.
    :param connection: a :class:`~pynamotable.connection.Connection`, created from
      settings when omitted.
    """

    def __init__(
        self,
        table_name: str,
        client: Optional[Any] = None,
        connection: Optional[Connection] = None,
    ) -> None:
        self.table_name = table_name
        self._client = client
        self.connection = connection

    def __repr__(self) -> str:
        return "Table<{}>".format(self.table_name)

    @property
    def client(self):
        if self._client is None:
            if self.connection is None:
                self.connection = Connection()
            self._client = self.connection.client
        return self._client

    def create_if_not_exists(self, hash_key_name: str, hash_key_type: str, *opts: Option) -> bool:
        """
        Performs the CreateTable operation unless the table already exists.

        Returns True if the table was created and False if it already existed.
        Any other error from the client is raised as is.
        """
        operation_kwargs = make_create_table_input(
            self.table_name,
            with_hash_key(hash_key_name, hash_key_type),
            *opts
        )
        log.debug("Calling %s with arguments %s", CREATE_TABLE, operation_kwargs)
        try:
            self.client.create_table(**operation_kwargs)
        except ClientError as e:
            if _error_code(e) == RESOURCE_IN_USE:
                log.info("Table %s already exists", self.table_name)
                return False
            raise
        return True

    def delete_if_exists(self) -> bool:
        """
        Performs the DeleteTable operation unless the table does not exist.

        Returns True if the table was deleted and False if there was no such table.
        Any other error from the client is raised as is.
        """
        operation_kwargs: DeleteTableInput = {
            TABLE_NAME: self.table_name
        }
        log.debug("Calling %s with arguments %s", DELETE_TABLE, operation_kwargs)
        try:
            self.client.delete_table(**operation_kwargs)
        except ClientError as e:
            if _error_code(e) == RESOURCE_NOT_FOUND:
                log.info("Table %s does not exist", self.table_name)
                return False
            raise
        return True
