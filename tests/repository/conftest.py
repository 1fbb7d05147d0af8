import pytest

from shipping_fees.repository.session import build_engine, init_db, make_session_factory
from shipping_fees.repository.users import UserRepository

SEED = [
    ("alice@example.com", "Alice Smith"),
    ("bob@example.com", "Bob Johnson"),
]

@pytest.fixture
def engine():
    # fresh throwaway database per test
    eng = build_engine("sqlite+pysqlite:///:memory:", echo=False)
    init_db(eng)
    yield eng
    eng.dispose()

@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)

@pytest.fixture
def session(session_factory):
    s = session_factory()
    repo = UserRepository(s)
    for email, name in SEED:
        repo.create(email, name)
    s.commit()
    yield s
    s.close()

@pytest.fixture
def repo(session):
    return UserRepository(session)
