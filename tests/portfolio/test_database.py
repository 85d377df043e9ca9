import os

from sqlalchemy import create_engine, inspect

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
os.environ.setdefault('PASSWORD_HASH_ROUNDS', '4')

from portfolio import database  # noqa: E402
from portfolio.models.user import User  # noqa: E402


def test_init_db_creates_users_table_with_unique_email() -> None:
    engine = create_engine('sqlite:///:memory:')

    database.init_db(engine)

    inspector = inspect(engine)
    assert User.__tablename__ in inspector.get_table_names()
    columns = {column['name'] for column in inspector.get_columns('users')}
    assert {'id', 'name', 'phone', 'email', 'hashed_password', 'role', 'created_at'} <= columns
    assert any(
        index['column_names'] == ['email'] and index['unique']
        for index in inspector.get_indexes('users')
    )
    engine.dispose()


def test_init_db_is_safe_to_repeat_per_engine() -> None:
    first = create_engine('sqlite:///:memory:')
    second = create_engine('sqlite:///:memory:')

    database.init_db(first)
    database.init_db(first)
    database.init_db(second)

    assert 'users' in inspect(first).get_table_names()
    assert 'users' in inspect(second).get_table_names()
    first.dispose()
    second.dispose()
