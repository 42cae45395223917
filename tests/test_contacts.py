import sqlite3

import pytest

from inboxdesk.container import ServiceContainer
from inboxdesk.contacts import ContactsView, contact_rows
from inboxdesk.database import DbContext
from inboxdesk.models import User
from inboxdesk.repositories import UserRepo

_SCHEMA = """
CREATE TABLE user (
    user_id INTEGER PRIMARY KEY,
    email TEXT NOT NULL,
    first_name TEXT,
    last_name TEXT,
    created_at TEXT
);
"""


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "mail.db"
    with sqlite3.connect(path) as setup:
        setup.executescript(_SCHEMA)
    context = DbContext()
    context.connect(path)
    yield context
    context.close()


@pytest.fixture
def container(db):
    services = ServiceContainer()
    services.add_singleton(UserRepo(db))
    return services


def test_contact_rows_keeps_order_and_fields():
    users = [
        User(1, "ann@example.com", "Ann", "Lee"),
        User(2, "bob@example.com", "Bob", "Ray"),
    ]
    assert contact_rows(users) == [
        ("ann@example.com", "Ann", "Lee"),
        ("bob@example.com", "Bob", "Ray"),
    ]


def test_contact_rows_empty():
    assert contact_rows([]) == []


def test_headers(container):
    view = ContactsView(container)
    assert view.HEADERS == ("Email", "First Name", "Last Name")
    assert view.rows() == []


def test_view_lists_users_from_database(container):
    repo = container.get_service(UserRepo)
    repo.add_user(User(email="ann@example.com", first_name="Ann", last_name="Lee"))
    repo.add_user(User(email="bob@example.com", first_name="Bob", last_name="Ray"))
    view = ContactsView(container)
    assert view.rows() == [
        ("ann@example.com", "Ann", "Lee"),
        ("bob@example.com", "Bob", "Ray"),
    ]
    assert all(len(row) == len(ContactsView.HEADERS) for row in view.rows())


def test_view_with_no_users(container):
    assert ContactsView(container).rows() == []


def test_view_rows_are_a_snapshot(container):
    repo = container.get_service(UserRepo)
    view = ContactsView(container)
    repo.add_user(User(email="late@example.com", first_name="Late", last_name="Comer"))
    assert view.rows() == []
    assert ContactsView(container).rows() == [("late@example.com", "Late", "Comer")]


def test_view_requires_user_repo():
    with pytest.raises(KeyError):
        ContactsView(ServiceContainer())