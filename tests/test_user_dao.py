"""Tests for UserDao."""

from unittest.mock import MagicMock

import pytest

from storefront.dao import UserDao
from storefront.models import User


class TestUserDao:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def mock_cursor(self, mock_db):
        cursor = MagicMock()
        mock_db.get_cursor.return_value.__enter__.return_value = cursor
        mock_db.transaction.return_value.__enter__.return_value = cursor
        return cursor

    @pytest.fixture
    def user_dao(self, mock_db):
        return UserDao(mock_db)

    def test_get_by_id_found(self, user_dao, mock_cursor):
        """Test fetching an existing user."""
        mock_cursor.fetchone.return_value = {"id": 1, "username": "Anton", "email": "anton@example.com"}

        user = user_dao.get_by_id(1)

        assert user.id == 1
        assert user.username == "Anton"
        assert user.email == "anton@example.com"
        assert mock_cursor.execute.call_args[0][1] == (1,)

    def test_get_by_id_missing_returns_none(self, user_dao, mock_cursor):
        """Test that a missing user is reported as None."""
        mock_cursor.fetchone.return_value = None

        assert user_dao.get_by_id(42) is None

    def test_get_all(self, user_dao, mock_cursor):
        """Test listing users."""
        mock_cursor.fetchall.return_value = [
            {"id": 1, "username": "Anton", "email": "a@example.com"},
            {"id": 2, "username": "Maria", "email": "m@example.com"},
        ]

        users = user_dao.get_all()

        assert [u.username for u in users] == ["Anton", "Maria"]

    def test_add_sets_generated_id(self, user_dao, mock_cursor):
        """Test that inserting a user returns and stores the generated ID."""
        mock_cursor.fetchone.return_value = {"id": 5}
        user = User(username="Anton", email="a@example.com")

        assert user_dao.add(user) == 5
        assert user.id == 5
        sql, params = mock_cursor.execute.call_args[0]
        assert "RETURNING id" in sql
        assert params == ("Anton", "a@example.com")

    def test_update_reports_missing_row(self, user_dao, mock_cursor):
        """Test that updating a user that does not exist returns False."""
        mock_cursor.rowcount = 0

        assert user_dao.update(User(id=9, username="x", email="y")) is False

    def test_update_existing(self, user_dao, mock_cursor):
        """Test updating an existing user."""
        mock_cursor.rowcount = 1

        assert user_dao.update(User(id=1, username="new", email="new@example.com")) is True
        assert mock_cursor.execute.call_args[0][1] == ("new", "new@example.com", 1)

    def test_delete_cascades_in_order(self, user_dao, mock_db, mock_cursor):
        """Test that deleting a user removes order links, then orders, then the user, in one transaction."""
        user_dao.delete(3)

        mock_db.transaction.assert_called_once()
        statements = [c[0][0] for c in mock_cursor.execute.call_args_list]
        assert len(statements) == 3
        assert "DELETE FROM order_products" in statements[0]
        assert "DELETE FROM orders" in statements[1]
        assert "DELETE FROM users" in statements[2]
        assert all(c[0][1] == (3,) for c in mock_cursor.execute.call_args_list)

    def test_count(self, user_dao, mock_cursor):
        mock_cursor.fetchone.return_value = {"count": 4}

        assert user_dao.count() == 4
