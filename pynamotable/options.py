"""
Declarative table and index options
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Each ``with_*`` factory returns an :class:`Option`, a single tagged mutation of a
:class:`TableOptions`. Options are folded in the order given: scalar fields are
overwritten by later options, list fields are appended to.

Secondary indexes carry their own option list. They are stored as raw
:class:`IndexDeclaration` values and only resolved when the request is rendered,
so an index always inherits the billing mode the table finally ends up with.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple

from pynamotable._schema import (
    CreateTableInput, GlobalSecondaryIndex, KeySchema, LocalSecondaryIndex, Projection,
    ProvisionedThroughput, SchemaAttrDefinition,
)
from pynamotable.constants import (
    ATTR_DEFINITIONS, ATTR_NAME, ATTR_TYPE, AVAILABLE_BILLING_MODES, BILLING_MODE,
    DEFAULT_BILLING_MODE, DEFAULT_READ_CAPACITY, DEFAULT_WRITE_CAPACITY, GLOBAL_SECONDARY_INDEXES,
    HASH, INDEX_NAME, KEY, KEY_SCHEMA, KEY_TYPE, LOCAL_SECONDARY_INDEXES, NON_KEY_ATTRIBUTES,
    PAY_PER_REQUEST_BILLING_MODE, PROJECTION, PROJECTION_TYPE, PROJECTION_TYPES,
    PROVISIONED_THROUGHPUT, RANGE, READ_CAPACITY_UNITS, SCALAR_ATTRIBUTE_TYPES, STREAM_ENABLED,
    STREAM_SPECIFICATION, STREAM_VIEW_TYPE, STREAM_VIEW_TYPES, TABLE_NAME, TAGS, VALUE,
    WRITE_CAPACITY_UNITS,
)
from pynamotable.exceptions import InvalidOptionError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Attribute:
    name: str
    type: str


@dataclass
class TableOptions:
    """
    The folded result of a list of options, for either a table or an index
    """
    attributes: List[Attribute] = field(default_factory=list)
    hash_key: Optional[Attribute] = None
    range_key: Optional[Attribute] = None
    billing_mode: str = DEFAULT_BILLING_MODE
    read_capacity_units: int = DEFAULT_READ_CAPACITY
    write_capacity_units: int = DEFAULT_WRITE_CAPACITY
    global_indexes: List['IndexDeclaration'] = field(default_factory=list)
    local_indexes: List['IndexDeclaration'] = field(default_factory=list)
    stream_view_type: Optional[str] = None
    tags: Dict[str, str] = field(default_factory=dict)

    def key_attributes(self) -> List[Attribute]:
        return [key for key in (self.hash_key, self.range_key) if key is not None]


class Option:
    """
    A single declarative mutation of :class:`TableOptions`.

    ``table`` and ``index`` tell where the option may be used.
    """
    table: ClassVar[bool] = True
    index: ClassVar[bool] = False

    def apply(self, options: TableOptions) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class AttrOption(Option):
    table = False
    index = True
    attribute: Attribute

    def apply(self, options: TableOptions) -> None:
        options.attributes.append(self.attribute)


@dataclass(frozen=True)
class HashKeyOption(Option):
    index = True
    attribute: Attribute

    def apply(self, options: TableOptions) -> None:
        options.hash_key = self.attribute


@dataclass(frozen=True)
class RangeKeyOption(Option):
    index = True
    attribute: Attribute

    def apply(self, options: TableOptions) -> None:
        options.range_key = self.attribute


@dataclass(frozen=True)
class BillingModeOption(Option):
    billing_mode: str

    def apply(self, options: TableOptions) -> None:
        options.billing_mode = self.billing_mode


@dataclass(frozen=True)
class ReadCapacityOption(Option):
    index = True
    units: int

    def apply(self, options: TableOptions) -> None:
        options.read_capacity_units = self.units


@dataclass(frozen=True)
class WriteCapacityOption(Option):
    index = True
    units: int

    def apply(self, options: TableOptions) -> None:
        options.write_capacity_units = self.units


@dataclass(frozen=True)
class StreamSpecificationOption(Option):
    stream_view_type: str

    def apply(self, options: TableOptions) -> None:
        options.stream_view_type = self.stream_view_type


@dataclass(frozen=True)
class TagsOption(Option):
    tags: Tuple[Tuple[str, str], ...]

    def apply(self, options: TableOptions) -> None:
        options.tags.update(self.tags)


@dataclass(frozen=True, repr=False)
class IndexDeclaration:
    """
    A secondary index as declared, before it is resolved against the table's billing mode
    """
    index_name: str
    projection_type: str
    global_index: bool
    opts: Tuple[Option, ...]

    def __repr__(self) -> str:
        kind = 'global' if self.global_index else 'local'
        return "IndexDeclaration<{} {}>".format(kind, self.index_name)

    def resolve(self, billing_mode: str) -> TableOptions:
        options = make_index_options(self.opts)
        options.billing_mode = billing_mode
        return options

    def render(self, billing_mode: str) -> Tuple[Dict[str, Any], List[Attribute]]:
        """
        Returns the request entry for this index and every attribute it references
        """
        options = self.resolve(billing_mode)
        projection: Projection = {PROJECTION_TYPE: self.projection_type}
        non_key_attributes = [attr.name for attr in options.attributes]
        if non_key_attributes:
            projection[NON_KEY_ATTRIBUTES] = non_key_attributes

        index: Dict[str, Any] = {
            INDEX_NAME: self.index_name,
            PROJECTION: projection,
        }
        key_schema = make_key_schema(options)
        if key_schema:
            index[KEY_SCHEMA] = key_schema
        if self.global_index:
            provisioned_throughput = make_provisioned_throughput(options)
            if provisioned_throughput is not None:
                index[PROVISIONED_THROUGHPUT] = provisioned_throughput
        return index, options.key_attributes() + options.attributes


@dataclass(frozen=True)
class SecondaryIndexOption(Option):
    declaration: IndexDeclaration

    def apply(self, options: TableOptions) -> None:
        if self.declaration.global_index:
            options.global_indexes.append(self.declaration)
        else:
            options.local_indexes.append(self.declaration)


def _attribute(name: str, attribute_type: str) -> Attribute:
    if not isinstance(name, str) or not name:
        raise InvalidOptionError("attribute name must be a non-empty string, got {!r}".format(name))
    if attribute_type not in SCALAR_ATTRIBUTE_TYPES:
        raise InvalidOptionError("incorrect type {!r} for attribute {}, available types: {}".format(
            attribute_type, name, SCALAR_ATTRIBUTE_TYPES))
    return Attribute(name, attribute_type)


def _capacity(units: int) -> int:
    if isinstance(units, bool) or not isinstance(units, int) or units < 1:
        raise InvalidOptionError("capacity units must be a positive integer, got {!r}".format(units))
    return units


def _index_declaration(index_name: str, projection_type: str, global_index: bool, opts) -> IndexDeclaration:
    if not isinstance(index_name, str) or not index_name:
        raise InvalidOptionError("index name must be a non-empty string, got {!r}".format(index_name))
    if projection_type not in PROJECTION_TYPES:
        raise InvalidOptionError("incorrect projection type {!r} for index {}, available types: {}".format(
            projection_type, index_name, PROJECTION_TYPES))
    for opt in opts:
        if not isinstance(opt, Option) or not opt.index:
            raise InvalidOptionError("{!r} cannot be used on index {}".format(opt, index_name))
    return IndexDeclaration(index_name, projection_type, global_index, tuple(opts))


def with_attr(attribute_name: str, attribute_type: str) -> Option:
    """
    Projects a non-key attribute into an index
    """
    return AttrOption(_attribute(attribute_name, attribute_type))


def with_hash_key(attribute_name: str, attribute_type: str) -> Option:
    return HashKeyOption(_attribute(attribute_name, attribute_type))


def with_range_key(attribute_name: str, attribute_type: str) -> Option:
    return RangeKeyOption(_attribute(attribute_name, attribute_type))


def with_billing_mode(billing_mode: str) -> Option:
    if billing_mode not in AVAILABLE_BILLING_MODES:
        raise InvalidOptionError("incorrect value for billing_mode, available modes: {}".format(AVAILABLE_BILLING_MODES))
    return BillingModeOption(billing_mode)


def with_read_capacity(units: int) -> Option:
    return ReadCapacityOption(_capacity(units))


def with_write_capacity(units: int) -> Option:
    return WriteCapacityOption(_capacity(units))


def with_stream_specification(stream_view_type: str) -> Option:
    """
    Enables a DynamoDB stream on the table with the given view type
    """
    if stream_view_type not in STREAM_VIEW_TYPES:
        raise InvalidOptionError("incorrect value for stream_view_type, available types: {}".format(STREAM_VIEW_TYPES))
    return StreamSpecificationOption(stream_view_type)


def with_tags(tags: Optional[Mapping[str, str]] = None, **kwargs: str) -> Option:
    merged = dict(tags or {}, **kwargs)
    for key, value in merged.items():
        if not isinstance(value, str):
            raise InvalidOptionError("tag {} must have a string value, got {!r}".format(key, value))
    return TagsOption(tuple(merged.items()))


def with_global_secondary_index(index_name: str, projection_type: str, *opts: Option) -> Option:
    """
    Declares a global secondary index.

    :param index_name: the name of the index
    :param projection_type: one of ``KEYS_ONLY``, ``ALL`` or ``INCLUDE``
    :param opts: index options: keys, projected attributes and capacity.
      Capacity only reaches the request when the table uses provisioned billing.
    """
    return SecondaryIndexOption(_index_declaration(index_name, projection_type, True, opts))


def with_local_secondary_index(index_name: str, projection_type: str, *opts: Option) -> Option:
    """
    Declares a local secondary index. Local indexes share the table's throughput,
    so any capacity options given here never reach the request.
    """
    return SecondaryIndexOption(_index_declaration(index_name, projection_type, False, opts))


def _make_options(opts: Iterable[Option], index: bool) -> TableOptions:
    options = TableOptions()
    for opt in opts:
        if not isinstance(opt, Option) or not (opt.index if index else opt.table):
            raise InvalidOptionError("{!r} cannot be used on {}".format(opt, 'an index' if index else 'a table'))
        opt.apply(options)
    return options


def make_table_options(opts: Iterable[Option]) -> TableOptions:
    return _make_options(opts, index=False)


def make_index_options(opts: Iterable[Option]) -> TableOptions:
    return _make_options(opts, index=True)


def make_key_schema(options: TableOptions) -> List[KeySchema]:
    key_schema: List[KeySchema] = []
    if options.hash_key is not None:
        key_schema.append({ATTR_NAME: options.hash_key.name, KEY_TYPE: HASH})
    if options.range_key is not None:
        key_schema.append({ATTR_NAME: options.range_key.name, KEY_TYPE: RANGE})
    return key_schema


def make_provisioned_throughput(options: TableOptions) -> Optional[ProvisionedThroughput]:
    if options.billing_mode == PAY_PER_REQUEST_BILLING_MODE:
        return None
    return {
        READ_CAPACITY_UNITS: options.read_capacity_units,
        WRITE_CAPACITY_UNITS: options.write_capacity_units,
    }


def merge(definitions: List[SchemaAttrDefinition], attributes: Iterable[Attribute]) -> List[SchemaAttrDefinition]:
    """
    Appends attribute definitions for `attributes`, skipping names already defined.

    The first definition of a name wins; a later one with a different type is ignored.
    """
    merged = list(definitions)
    seen = {item[ATTR_NAME]: item[ATTR_TYPE] for item in merged}
    for attr in attributes:
        if attr.name in seen:
            if seen[attr.name] != attr.type:
                log.warning(
                    "Attribute %s is already defined with type %s, ignoring type %s",
                    attr.name, seen[attr.name], attr.type,
                )
            continue
        seen[attr.name] = attr.type
        merged.append({ATTR_NAME: attr.name, ATTR_TYPE: attr.type})
    return merged


def make_create_table_input(table_name: str, *opts: Option) -> CreateTableInput:
    """
    Renders the CreateTable request for `table_name` from `opts`
    """
    options = make_table_options(opts)

    operation_kwargs: Dict[str, Any] = {
        TABLE_NAME: table_name,
        BILLING_MODE: options.billing_mode,
    }
    attribute_definitions = merge([], options.key_attributes())

    key_schema = make_key_schema(options)
    if key_schema:
        operation_kwargs[KEY_SCHEMA] = key_schema

    provisioned_throughput = make_provisioned_throughput(options)
    if provisioned_throughput is not None:
        operation_kwargs[PROVISIONED_THROUGHPUT] = provisioned_throughput

    if options.stream_view_type:
        operation_kwargs[STREAM_SPECIFICATION] = {
            STREAM_ENABLED: True,
            STREAM_VIEW_TYPE: options.stream_view_type,
        }

    global_secondary_indexes: List[GlobalSecondaryIndex] = []
    for declaration in options.global_indexes:
        index, attributes = declaration.render(options.billing_mode)
        global_secondary_indexes.append(index)  # type: ignore
        attribute_definitions = merge(attribute_definitions, attributes)
    if global_secondary_indexes:
        operation_kwargs[GLOBAL_SECONDARY_INDEXES] = global_secondary_indexes

    local_secondary_indexes: List[LocalSecondaryIndex] = []
    for declaration in options.local_indexes:
        index, attributes = declaration.render(options.billing_mode)
        local_secondary_indexes.append(index)  # type: ignore
        attribute_definitions = merge(attribute_definitions, attributes)
    if local_secondary_indexes:
        operation_kwargs[LOCAL_SECONDARY_INDEXES] = local_secondary_indexes

    if attribute_definitions:
        operation_kwargs[ATTR_DEFINITIONS] = attribute_definitions

    if options.tags:
        operation_kwargs[TAGS] = [
            {
                KEY: k,
                VALUE: v
            } for k, v in options.tags.items()
        ]

    return operation_kwargs  # type: ignore
