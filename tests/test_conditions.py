import logging

import pytest

from crudbuilder import PostgreSQLSpec, delete_query, select_builder, update_query


def select_base():
    return select_builder().select_from('users')


def update_base():
    return update_query().update_table('users').set_values({'age': 1})


def delete_base():
    return delete_query().delete_from('users')


BUILDER_FACTORIES = [select_base, update_base, delete_base]


class TestConditionMixin:

    @pytest.mark.parametrize('make_builder', BUILDER_FACTORIES)
    def test_placeholders_match_parameters(self, make_builder):
        builder = (make_builder()
                   .where_eq('name', 'kim')
                   .and_gt('age', 3)
                   .or_like('email', '%@mail.com')
                   .where_in('id', [1, 2, 3])
                   .where_between('age', 1, 99)
                   .and_is_null('deleted_at'))

        assert builder.get_query().count('?') == len(builder.get_parameters())
        assert builder.get_parameters()[-8:] == ['kim', 3, '%@mail.com', 1, 2, 3, 1, 99]

    @pytest.mark.parametrize('make_builder', BUILDER_FACTORIES)
    @pytest.mark.parametrize(
        'method, args', [
            ['where_eq', ('', 1)],
            ['where_eq', ('  ', 1)],
            ['where_eq', (None, 1)],
            ['where_eq', ('id', None)],
            ['where_eq', ('id', '')],
            ['and_lt', ('id', ' \t')],
            ['or_gte', (None, None)],
            ['where_like', ('name', '')],
            ['where_in', ('id', [])],
            ['where_in', ('', [1])],
            ['where_in', ('id', None)],
            ['where_is_null', ('', )],
            ['or_is_not_null', (None, )],
            ['where_between', ('age', None, 1)],
            ['where_between', (' ', 1, 2)],
        ]
    )
    def test_noop(self, make_builder, method, args):
        builder = make_builder()
        query_before = builder.get_query()
        params_before = builder.get_parameters()

        result = getattr(builder, method)(*args)

        assert result is builder
        assert builder.get_query() == query_before
        assert builder.get_parameters() == params_before

    @pytest.mark.parametrize('value', [0, False, 0.0, ()])
    def test_falsy_non_string_values_are_used(self, value):
        builder = select_base().where_eq('flag', value)

        assert builder.get_query() == 'SELECT * FROM users WHERE flag = ?'
        assert builder.get_parameters() == [value]

    def test_in_always_starts_with_where(self):
        builder = select_base().where_eq('city', 'Seoul').where_in('id', [1, 2])

        assert builder.get_query() == 'SELECT * FROM users WHERE city = ? WHERE id IN (?, ?)'

    def test_between_always_starts_with_where(self):
        builder = select_base().where_eq('city', 'Seoul').where_between('age', 1, 2)

        assert builder.get_query() == 'SELECT * FROM users WHERE city = ? WHERE age BETWEEN ? AND ?'

    def test_joiner_spacing(self):
        query = select_base().where_eq('a', 1).and_eq('b', 2).or_eq('c', 3).get_query()

        assert '  ' not in query
        assert query == 'SELECT * FROM users WHERE a = ? AND b = ? OR c = ?'

    def test_in_accepts_generator(self):
        builder = select_base().where_in('id', (i for i in range(3)))

        assert builder.get_query() == 'SELECT * FROM users WHERE id IN (?, ?, ?)'
        assert builder.get_parameters() == [0, 1, 2]

    def test_get_parameters_is_copy(self):
        builder = select_base().where_eq('id', 1)

        builder.get_parameters().append(2)
        assert builder.get_parameters() == [1]

    def test_skipped_condition_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='crudbuilder.conditions'):
            select_base().where_eq('id', None)

        assert 'Skip = condition' in caplog.text

    def test_postgresql_spec(self):
        builder = (select_builder(spec=PostgreSQLSpec())
                   .select_from('users')
                   .where_eq('name', 'kim')
                   .where_in('id', [1, 2])
                   .where_between('age', 1, 2))

        assert builder.get_query() == (
            'SELECT * FROM users WHERE name = %s WHERE id IN (%s, %s) WHERE age BETWEEN %s AND %s'
        )
        assert builder.get_parameters() == ['kim', 1, 2, 1, 2]

    @pytest.mark.parametrize('negated, expected_op', [[False, 'IN'], [True, 'NOT IN']])
    def test_in_single_string(self, negated, expected_op):
        builder = select_base()
        method = builder.where_not_in if negated else builder.where_in

        method('name', 'abc')

        assert builder.get_query() == f'SELECT * FROM users WHERE name {expected_op} (?)'
        assert builder.get_parameters() == ['abc']

    def test_in_blank_string_is_bound(self):
        builder = select_base().where_in('name', '')

        assert builder.get_query() == 'SELECT * FROM users WHERE name IN (?)'
        assert builder.get_parameters() == ['']
