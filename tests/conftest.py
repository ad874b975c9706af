import pytest

from crudbuilder import delete_query, insert, select_builder, update_query


@pytest.fixture(scope="function")
def select_qb():
    return select_builder()


@pytest.fixture(scope="function")
def insert_qb():
    return insert()


@pytest.fixture(scope="function")
def update_qb():
    return update_query()


@pytest.fixture(scope="function")
def delete_qb():
    return delete_query().delete_from('users')