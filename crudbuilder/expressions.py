from collections import namedtuple

from crudbuilder.exceptions import InvalidArgumentError


class Operator:
    WHERE = 'WHERE'
    AND = 'AND'
    OR = 'OR'

    EQ = '='
    LT = '<'
    LTE = '<='
    GT = '>'
    GTE = '>='
    LIKE = 'LIKE'

    IN = 'IN'
    NOT_IN = 'NOT IN'
    IS_NULL = 'IS NULL'
    IS_NOT_NULL = 'IS NOT NULL'

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'


class Order:
    ASC = 'ASC'
    DESC = 'DESC'

    CHOICES = (ASC, DESC)

    @classmethod
    def resolve(cls, direction):
        ordering = str(direction).strip().upper() if direction is not None else ''
        if ordering not in cls.CHOICES:
            raise InvalidArgumentError(f'Ordering should be one of {", ".join(cls.CHOICES)}, got {direction!r}.')
        return ordering


class OrderByExpression(namedtuple('OrderByExpression', 'value, ordering')):

    @classmethod
    def from_field_name(cls, field_name):
        if field_name.startswith('-'):
            value = field_name[1:]
            ordering = Order.DESC
        else:
            value = field_name
            ordering = Order.ASC

        return cls(value=value, ordering=ordering)

    def __str__(self):
        return f'{self.value} {self.ordering}'


class JoinExpression:
    INNER = None  # plain JOIN
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'

    def __init__(self, table_name, on=None, join_type=INNER):
        self.table_name = table_name
        self.on = on
        self.join_type = join_type

    def __str__(self):
        join_str = f'{self.join_type} JOIN' if self.join_type else 'JOIN'
        result = f'{join_str} {self.table_name}'
        if self.on:
            left, right = self.on
            result = f'{result} ON {left} = {right}'
        return result
