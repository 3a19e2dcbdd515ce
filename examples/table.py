"""
Example use of the Table API against DynamoDB Local
"""
import logging

from pynamotable.connection import Connection
from pynamotable.constants import (
    ALL, INCLUDE, NUMBER, PAY_PER_REQUEST_BILLING_MODE, STREAM_NEW_AND_OLD_IMAGE, STRING,
)
from pynamotable.options import (
    with_attr, with_billing_mode, with_global_secondary_index, with_hash_key,
    with_local_secondary_index, with_range_key, with_stream_specification, with_tags,
)
from pynamotable.table import Table

logging.basicConfig()
logging.getLogger('pynamotable').setLevel(logging.DEBUG)

table = Table('Thread', connection=Connection(host='http://localhost:8000'))

# Safe to run repeatedly
table.create_if_not_exists(
    'forum_name', STRING,
    with_range_key('subject', STRING),
    with_billing_mode(PAY_PER_REQUEST_BILLING_MODE),
    with_stream_specification(STREAM_NEW_AND_OLD_IMAGE),
    with_global_secondary_index(
        'views-index', INCLUDE,
        with_hash_key('views', NUMBER),
        with_attr('title', STRING),
    ),
    with_local_secondary_index(
        'last-post-index', ALL,
        with_hash_key('forum_name', STRING),
        with_range_key('last_post_datetime', STRING),
    ),
    with_tags(env='local'),
)

table.delete_if_exists()
table.delete_if_exists()
