"""
Botocore client construction
"""
import logging
from threading import local
from typing import Optional

import botocore.client
import botocore.session
from botocore.session import get_session

from pynamotable.constants import SERVICE_NAME
from pynamotable.settings import get_settings_value

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


class Connection(object):
    """
    Builds and caches the botocore DynamoDB client used by a :class:`~pynamotable.table.Table`
    """

    def __init__(self,
                 region: Optional[str] = None,
                 host: Optional[str] = None,
                 read_timeout_seconds: Optional[float] = None,
                 connect_timeout_seconds: Optional[float] = None,
                 max_retry_attempts: Optional[int] = None,
                 max_pool_connections: Optional[int] = None):
        self._local = local()
        self._client = None
        self.region = region if region else get_settings_value('region')
        self.host = host if host else get_settings_value('host')

        if connect_timeout_seconds is not None:
            self._connect_timeout_seconds = connect_timeout_seconds
        else:
            self._connect_timeout_seconds = get_settings_value('connect_timeout_seconds')

        if read_timeout_seconds is not None:
            self._read_timeout_seconds = read_timeout_seconds
        else:
            self._read_timeout_seconds = get_settings_value('read_timeout_seconds')

        if max_retry_attempts is not None:
            self._max_retry_attempts = max_retry_attempts
        else:
            self._max_retry_attempts = get_settings_value('max_retry_attempts')

        if max_pool_connections is not None:
            self._max_pool_connections = max_pool_connections
        else:
            self._max_pool_connections = get_settings_value('max_pool_connections')

    def __repr__(self) -> str:
        return "Connection<{}>".format(self.client.meta.endpoint_url)

    @property
    def session(self) -> botocore.session.Session:
        """
        Returns a valid botocore session
        """
        # botocore client creation is not thread safe
        if getattr(self._local, 'session', None) is None:
            self._local.session = get_session()
        return self._local.session

    @property
    def client(self):
        """
        Returns a botocore dynamodb client
        """
        # botocore has a known issue where it will cache empty credentials
        # https://github.com/boto/botocore/blob/4d55c9b4142/botocore/credentials.py#L1016-L1021
        # if the client does not have credentials, we create a new client
        if not self._client or (self._client._request_signer and not self._client._request_signer._credentials):
            config = botocore.client.Config(
                connect_timeout=self._connect_timeout_seconds,
                read_timeout=self._read_timeout_seconds,
                max_pool_connections=self._max_pool_connections,
                retries={'total_max_attempts': self._max_retry_attempts + 1})
            log.debug("Creating %s client in %s (endpoint: %s)", SERVICE_NAME, self.region, self.host)
            self._client = self.session.create_client(SERVICE_NAME, self.region, endpoint_url=self.host, config=config)
        return self._client
