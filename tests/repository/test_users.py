import logging
from datetime import datetime

import pytest

from shipping_fees.errors import DuplicateEmail, RepositoryError, UserNotFound
from shipping_fees.repository.session import session_scope
from shipping_fees.repository.users import UserRepository

def test_get_by_id(repo):
    user = repo.get_by_id(1)
    assert user.email == "alice@example.com"
    assert user.name == "Alice Smith"
    assert isinstance(user.created_at, datetime)

def test_get_by_id_missing(repo):
    with pytest.raises(UserNotFound) as exc:
        repo.get_by_id(999)
    assert exc.value.code == "USER_NOT_FOUND"
    assert exc.value.details == {"id": 999}

def test_get_by_email(repo):
    assert repo.get_by_email("bob@example.com").id == 2

def test_get_by_email_missing(repo):
    with pytest.raises(UserNotFound):
        repo.get_by_email("nobody@example.com")

def test_create(repo):
    user = repo.create("carol@example.com", "Carol White")
    assert user.id == 3
    assert user.created_at is not None
    assert repo.get_by_email("carol@example.com").name == "Carol White"

def test_create_duplicate_email(repo):
    with pytest.raises(DuplicateEmail) as exc:
        repo.create("alice@example.com", "Another Alice")
    assert exc.value.email == "alice@example.com"
    assert isinstance(exc.value, RepositoryError)
    assert len(repo.list()) == 2

def test_update(repo):
    repo.update(1, "alice.smith@example.com", "Alice S.")
    user = repo.get_by_id(1)
    assert (user.email, user.name) == ("alice.smith@example.com", "Alice S.")

def test_update_keeps_own_email(repo):
    repo.update(2, "bob@example.com", "Robert Johnson")
    assert repo.get_by_id(2).name == "Robert Johnson"

def test_update_missing(repo):
    with pytest.raises(UserNotFound):
        repo.update(999, "x@example.com", "X")

def test_update_to_taken_email(repo):
    with pytest.raises(DuplicateEmail):
        repo.update(2, "alice@example.com", "Bob")
    assert repo.get_by_id(2).email == "bob@example.com"

def test_delete(repo):
    repo.delete(1)
    with pytest.raises(UserNotFound):
        repo.get_by_id(1)

def test_delete_missing(repo):
    with pytest.raises(UserNotFound):
        repo.delete(999)

def test_list_ordered_by_id(repo):
    repo.create("dave@example.com", "Dave")
    users = repo.list()
    assert [u.id for u in users] == [1, 2, 3]
    assert [u.email for u in users][-1] == "dave@example.com"

def test_failures_are_logged(repo, caplog):
    with caplog.at_level(logging.WARNING, logger="shipping_fees.repository.users"):
        with pytest.raises(UserNotFound):
            repo.get_by_id(42)
    assert any("id=42" in r.getMessage() for r in caplog.records)

def test_session_scope_commits(session_factory, session):
    with session_scope(session_factory) as s:
        UserRepository(s).create("erin@example.com", "Erin")
    with session_scope(session_factory) as s:
        assert UserRepository(s).get_by_email("erin@example.com").name == "Erin"

def test_session_scope_rolls_back_on_error(session_factory, session):
    with pytest.raises(DuplicateEmail):
        with session_scope(session_factory) as s:
            repo = UserRepository(s)
            repo.create("frank@example.com", "Frank")
            repo.create("alice@example.com", "Alice again")
    with session_scope(session_factory) as s:
        with pytest.raises(UserNotFound):
            UserRepository(s).get_by_email("frank@example.com")

@pytest.fixture
def stale_email_check(monkeypatch):
    # another writer lands the same email between the lookup and the insert
    monkeypatch.setattr(UserRepository, "_find_by_email", lambda self, email: None)

def test_unique_violation_keeps_earlier_work(session_factory, session, stale_email_check, caplog):
    with session_scope(session_factory) as s:
        repo = UserRepository(s)
        xavier = repo.create("xavier@example.com", "Xavier")
        with caplog.at_level(logging.WARNING, logger="shipping_fees.repository.users"):
            with pytest.raises(DuplicateEmail):
                repo.create("alice@example.com", "Alice again")
        assert any("Unique constraint" in r.getMessage() for r in caplog.records)
        xavier_id = xavier.id

    with session_scope(session_factory) as s:
        users = UserRepository(s).list()
        assert [u.email for u in users] == ["alice@example.com", "bob@example.com", "xavier@example.com"]
        assert users[-1].id == xavier_id

def test_unique_violation_on_update_keeps_row(session_factory, session, stale_email_check):
    with session_scope(session_factory) as s:
        repo = UserRepository(s)
        repo.update(1, "alice@example.com", "Alice Renamed")
        with pytest.raises(DuplicateEmail):
            repo.update(2, "alice@example.com", "Bob")
        assert repo.get_by_id(2).email == "bob@example.com"

    with session_scope(session_factory) as s:
        repo = UserRepository(s)
        assert repo.get_by_id(1).name == "Alice Renamed"
        assert repo.get_by_id(2).name == "Bob Johnson"
