import logging

from crudbuilder.db_specs import SQLiteSpec, PostgreSQLSpec
from crudbuilder.exceptions import QueryBuilderError, InvalidArgumentError, IllegalStateError
from crudbuilder.expressions import Order
from crudbuilder.queries import (
    SelectBuilder,
    InsertBuilder,
    UpdateBuilder,
    DeleteBuilder,
    select_builder,
    insert,
    update_query,
    delete_query,
)


__version__ = "0.1.0"


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    'SQLiteSpec', 'PostgreSQLSpec',
    'QueryBuilderError', 'InvalidArgumentError', 'IllegalStateError',
    'Order',
    'SelectBuilder', 'InsertBuilder', 'UpdateBuilder', 'DeleteBuilder',
    'select_builder', 'insert', 'update_query', 'delete_query',
]
