import pytest
from personapi.db.connect import make_session_factory
from personapi.db.models import sqlite_engine


@pytest.fixture(scope="function")
def db_session(tmp_path):
    engine = sqlite_engine(f"sqlite:///{tmp_path}/test.db")
    get_test_session = make_session_factory(engine)
    with get_test_session() as session:
        yield session
