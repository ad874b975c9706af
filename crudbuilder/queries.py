from crudbuilder.conditions import ConditionMixin
from crudbuilder.db_specs import default_spec
from crudbuilder.exceptions import IllegalStateError, InvalidArgumentError
from crudbuilder.expressions import JoinExpression, Operator, Order, OrderByExpression
from crudbuilder.utils import has_text


class BaseQuery:
    """
    Accumulates sql text and its bound parameters.

    Text is only ever appended, so the parameters list always follows the
    left-to-right order of placeholders in the query.
    """

    def __init__(self, spec=None):
        self.spec = spec or default_spec

        self._parts = []
        self._params = []

    def get_query(self):
        return ''.join(self._parts)

    def get_parameters(self):
        return list(self._params)

    def as_tuple(self):
        """Return (sql, params) pair, ready to be passed to `cursor.execute`."""
        return self.get_query(), tuple(self._params)

    def __str__(self):
        return self.get_query()

    def __repr__(self):
        return f'<{self.__class__.__name__}: {self.get_query()!r}, params={self._params!r}>'

    def _append(self, *parts):
        self._parts.extend(parts)

    def _add_parameter(self, value):
        self._params.append(value)

    def _add_parameters(self, values):
        self._params.extend(values)

    def _append_operand(self, op, value):
        self._append(f' {op} {self.spec.value_escape}')
        self._add_parameter(value)
        return self


class ComparisonMixin:
    """Comparison to finish a condition which column was given by a previous call."""

    def eq(self, value):
        return self._append_operand(Operator.EQ, value)

    def gt(self, value):
        return self._append_operand(Operator.GT, value)

    def gte(self, value):
        return self._append_operand(Operator.GTE, value)

    def lt(self, value):
        return self._append_operand(Operator.LT, value)

    def lte(self, value):
        return self._append_operand(Operator.LTE, value)


class ArithmeticMixin(ComparisonMixin):

    def multiply(self, value):
        return self._append_operand(Operator.MULTIPLY, value)

    def add(self, value):
        return self._append_operand(Operator.ADD, value)

    def subtract(self, value):
        return self._append_operand(Operator.SUBTRACT, value)


class SelectBuilder(ConditionMixin, ComparisonMixin, BaseQuery):

    def select(self, columns):
        if isinstance(columns, str):
            columns = [columns]
        self._append(f"SELECT ({', '.join(columns)})")
        return self

    def from_(self, table):
        self._append(f' FROM {table}')
        return self

    def select_from(self, table):
        self._append(f'SELECT * FROM {table}')
        return self

    def where(self, condition):
        return self._append_raw(Operator.WHERE, condition)

    def or_(self, column):
        return self._append_raw(Operator.OR, column)

    def and_(self, column):
        return self._append_raw(Operator.AND, column)

    def join(self, table):
        self._append(f' {JoinExpression(table)}')
        return self

    def left_join(self, table):
        self._append(f' {JoinExpression(table, join_type=JoinExpression.LEFT)}')
        return self

    def on(self, left_column, right_column):
        self._append(f' ON {left_column} = {right_column}')
        return self

    def order_by(self, column, direction=None):
        """
        Add ORDER BY clause. When direction is omitted,
        a leading '-' of the column name means descending order.
        """
        if direction is None:
            order_exp = OrderByExpression.from_field_name(column)
        else:
            order_exp = OrderByExpression(value=column, ordering=Order.resolve(direction))

        self._append(f' ORDER BY {order_exp}')
        return self

    def _append_raw(self, joiner, fragment):
        if has_text(fragment):
            self._append_joiner(joiner)
            self._append(fragment)
        return self


class InsertBuilder(BaseQuery):

    def columns_and_values(self, table, column_values):
        columns = list(column_values)

        self._append_insert_into(table)
        self._append(f" ({', '.join(columns)}) VALUES ({self.spec.placeholders(len(columns))})")
        self._add_parameters(column_values[column] for column in columns)
        return self

    def columns_and_multi_values(self, table, rows):
        rows = list(rows) if rows is not None else []
        if not rows:
            raise InvalidArgumentError('Row data cannot be None or empty.')

        # column names are taken from the first row only
        columns = list(rows[0])

        self._append_insert_into(table)
        self._append(f" ({', '.join(columns)}) VALUES ")
        self._append_multi_values([list(row.values()) for row in rows])
        return self

    def values(self, table, values):
        values = list(values)

        self._append_insert_into(table)
        self._append(f' VALUES ({self.spec.placeholders(len(values))})')
        self._add_parameters(values)
        return self

    def multi_values(self, table, value_lists):
        value_lists = [list(values) for values in value_lists] if value_lists is not None else []
        if not value_lists:
            raise InvalidArgumentError('Values cannot be None or empty.')

        self._append_insert_into(table)
        self._append(' VALUES ')
        self._append_multi_values(value_lists)
        return self

    def _append_insert_into(self, table):
        self._append(f'INSERT INTO {table}')

    def _append_multi_values(self, value_lists):
        groups = []
        for values in value_lists:
            groups.append(f'({self.spec.placeholders(len(values))})')
            self._add_parameters(values)
        self._append(', '.join(groups))


class CaseState:
    OUTSIDE = 'outside'
    INSIDE = 'inside'


class UpdateBuilder(ConditionMixin, ArithmeticMixin, BaseQuery):
    """
    UPDATE statement builder.

    Besides plain assignments, a column can be set with a CASE expression:

        (update_query()
            .update_table('members')
            .set_case('grade')
            .when('points').gte(1000).then('Platinum')
            .when('points').gte(500).then('Gold')
            .end_case('Bronze'))

    `when`, `then`, `then_column` and `end_case` are only allowed between
    `set_case` and `end_case`.
    """

    def __init__(self, spec=None):
        super().__init__(spec=spec)
        self._case_state = CaseState.OUTSIDE

    @property
    def case_state(self):
        return self._case_state

    def update_table(self, table):
        if not has_text(table):
            raise InvalidArgumentError('Table name cannot be None or empty.')

        self._append(f'UPDATE {table}')
        return self

    def join(self, table, on_column, equal_to_column):
        return self._append_join(table, on_column, equal_to_column, JoinExpression.INNER)

    def left_join(self, table, on_column, equal_to_column):
        return self._append_join(table, on_column, equal_to_column, JoinExpression.LEFT)

    def right_join(self, table, on_column, equal_to_column):
        return self._append_join(table, on_column, equal_to_column, JoinExpression.RIGHT)

    def set_values(self, column_values):
        if not column_values:
            raise InvalidArgumentError('Column values cannot be None or empty.')

        value_escape = self.spec.value_escape
        columns = list(column_values)
        fields_part = ', '.join(f'{column} = {value_escape}' for column in columns)

        self._append(f' SET {fields_part}')
        self._add_parameters(column_values[column] for column in columns)
        return self

    def set_case(self, column):
        if not has_text(column):
            raise InvalidArgumentError('Column name cannot be None or empty.')
        if self._case_state == CaseState.INSIDE:
            raise IllegalStateError('Previous CASE expression should be closed with end_case method.')

        self._append(f' SET {column} = CASE')
        self._case_state = CaseState.INSIDE
        return self

    def when(self, column):
        self._check_inside_case('when')
        self._append(f' WHEN {column}')
        return self

    def then(self, value):
        self._check_inside_case('then')
        self._append(f' THEN {self.spec.value_escape}')
        self._add_parameter(value)
        return self

    def then_column(self, column):
        self._check_inside_case('then_column')
        self._append(f' THEN {column}')
        return self

    def end_case(self, default_value):
        self._check_inside_case('end_case')
        self._append(f' ELSE {self.spec.value_escape} END')
        self._add_parameter(default_value)
        self._case_state = CaseState.OUTSIDE
        return self

    def _check_inside_case(self, method_name):
        if self._case_state != CaseState.INSIDE:
            raise IllegalStateError(f'{method_name} can only be called inside CASE, start it with set_case method.')

    def _append_join(self, table, on_column, equal_to_column, join_type):
        if not all(has_text(arg) for arg in (table, on_column, equal_to_column)):
            raise InvalidArgumentError('Join table and columns cannot be None or empty.')

        join_exp = JoinExpression(table, on=(on_column, equal_to_column), join_type=join_type)
        self._append(f' {join_exp}')
        return self


class DeleteState:
    NO_TABLE = 'no_table'
    TABLE_SET = 'table_set'


class DeleteBuilder(ConditionMixin, BaseQuery):

    def __init__(self, spec=None):
        super().__init__(spec=spec)
        self._state = DeleteState.NO_TABLE

    @property
    def table_specified(self):
        return self._state == DeleteState.TABLE_SET

    def delete_from(self, table):
        if not has_text(table):
            raise InvalidArgumentError('Table name cannot be None or empty.')

        self._append(f'DELETE FROM {table}')
        self._state = DeleteState.TABLE_SET
        return self

    def _check_condition_allowed(self):
        if not self.table_specified:
            raise IllegalStateError('You should specify the table first using delete_from method.')


def select_builder(spec=None):
    return SelectBuilder(spec=spec)


def insert(spec=None):
    return InsertBuilder(spec=spec)


def update_query(spec=None):
    return UpdateBuilder(spec=spec)


def delete_query(spec=None):
    return DeleteBuilder(spec=spec)
