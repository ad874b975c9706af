import logging

from crudbuilder.expressions import Operator
from crudbuilder.utils import has_text, has_value


logger = logging.getLogger(__name__)


class ConditionMixin:
    """
    WHERE / AND / OR predicates shared by select, update and delete builders.

    Every condition method is permissive: a blank column or a missing value means
    "nothing to filter by" and the builder is returned untouched. That allows optional
    filters to be chained without branching on the caller side:

        builder.where_eq('name', name).and_gt('age', min_age)

    The host class should provide `_append`, `_add_parameter` and `spec`.
    """

    def where_eq(self, column, value):
        return self._add_condition(Operator.EQ, column, value, Operator.WHERE)

    def where_lt(self, column, value):
        return self._add_condition(Operator.LT, column, value, Operator.WHERE)

    def where_lte(self, column, value):
        return self._add_condition(Operator.LTE, column, value, Operator.WHERE)

    def where_gt(self, column, value):
        return self._add_condition(Operator.GT, column, value, Operator.WHERE)

    def where_gte(self, column, value):
        return self._add_condition(Operator.GTE, column, value, Operator.WHERE)

    def where_like(self, column, pattern):
        return self._add_condition(Operator.LIKE, column, pattern, Operator.WHERE)

    def where_in(self, column, values):
        return self._add_in_condition(column, values)

    def where_not_in(self, column, values):
        return self._add_in_condition(column, values, negated=True)

    def where_is_null(self, column):
        return self._add_is_null(column, Operator.IS_NULL, Operator.WHERE)

    def where_is_not_null(self, column):
        return self._add_is_null(column, Operator.IS_NOT_NULL, Operator.WHERE)

    def where_between(self, column, start, end):
        return self._add_between(column, start, end)

    def or_eq(self, column, value):
        return self._add_condition(Operator.EQ, column, value, Operator.OR)

    def or_lt(self, column, value):
        return self._add_condition(Operator.LT, column, value, Operator.OR)

    def or_lte(self, column, value):
        return self._add_condition(Operator.LTE, column, value, Operator.OR)

    def or_gt(self, column, value):
        return self._add_condition(Operator.GT, column, value, Operator.OR)

    def or_gte(self, column, value):
        return self._add_condition(Operator.GTE, column, value, Operator.OR)

    def or_like(self, column, pattern):
        return self._add_condition(Operator.LIKE, column, pattern, Operator.OR)

    def or_is_null(self, column):
        return self._add_is_null(column, Operator.IS_NULL, Operator.OR)

    def or_is_not_null(self, column):
        return self._add_is_null(column, Operator.IS_NOT_NULL, Operator.OR)

    def and_eq(self, column, value):
        return self._add_condition(Operator.EQ, column, value, Operator.AND)

    def and_lt(self, column, value):
        return self._add_condition(Operator.LT, column, value, Operator.AND)

    def and_lte(self, column, value):
        return self._add_condition(Operator.LTE, column, value, Operator.AND)

    def and_gt(self, column, value):
        return self._add_condition(Operator.GT, column, value, Operator.AND)

    def and_gte(self, column, value):
        return self._add_condition(Operator.GTE, column, value, Operator.AND)

    def and_like(self, column, pattern):
        return self._add_condition(Operator.LIKE, column, pattern, Operator.AND)

    def and_is_null(self, column):
        return self._add_is_null(column, Operator.IS_NULL, Operator.AND)

    def and_is_not_null(self, column):
        return self._add_is_null(column, Operator.IS_NOT_NULL, Operator.AND)

    def _check_condition_allowed(self):
        """Hook for builders that require some setup before any condition."""

    def _add_condition(self, op, column, value, joiner):
        self._check_condition_allowed()
        if not has_text(column) or not has_value(value):
            logger.debug('Skip %s condition: column=%r, value=%r', op, column, value)
            return self

        self._append_joiner(joiner)
        self._append(f'{column} {op} {self.spec.value_escape}')
        self._add_parameter(value)
        return self

    def _add_is_null(self, column, null_op, joiner):
        self._check_condition_allowed()
        if not has_text(column):
            logger.debug('Skip %s condition: column=%r', null_op, column)
            return self

        self._append_joiner(joiner)
        self._append(f'{column} {null_op}')
        return self

    def _add_between(self, column, start, end):
        self._check_condition_allowed()
        if not has_text(column) or not has_value(start) or not has_value(end):
            logger.debug('Skip BETWEEN condition: column=%r, start=%r, end=%r', column, start, end)
            return self

        value_escape = self.spec.value_escape
        self._append_joiner(Operator.WHERE)
        self._append(f'{column} BETWEEN {value_escape} AND {value_escape}')
        self._add_parameter(start)
        self._add_parameter(end)
        return self

    def _add_in_condition(self, column, values, negated=False):
        self._check_condition_allowed()
        op = Operator.NOT_IN if negated else Operator.IN
        if values is None:
            values = []
        elif isinstance(values, str):
            values = [values]
        else:
            values = list(values)
        if not has_text(column) or not values:
            logger.debug('Skip %s condition: column=%r, values=%r', op, column, values)
            return self

        # IN conditions always start a new WHERE, they are never chained with AND / OR
        self._append_joiner(Operator.WHERE)
        self._append(f'{column} {op} ({self.spec.placeholders(len(values))})')
        for value in values:
            self._add_parameter(value)
        return self

    def _append_joiner(self, joiner):
        self._append(f' {joiner} ')
