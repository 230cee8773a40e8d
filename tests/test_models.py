"""Tests for the Record contract and the mapped types."""

import pytest

from liteorm.models import Book, Record, User


class TestUser:
    """User mapping."""

    def test_default_is_zero_record(self):
        user = User()
        assert (user.id, user.name, user.age) == (0, "", 0)

    def test_positional_construction_leaves_key_unassigned(self):
        user = User("Alice", 30)
        assert user.name == "Alice"
        assert user.age == 30
        assert user.id == 0

    def test_statements(self):
        assert User.table_name() == "users"
        assert User.primary_key() == "id"
        assert User.create_table_sql() == (
            "CREATE TABLE IF NOT EXISTS users("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, age INT);"
        )
        assert User.insert_sql() == "INSERT INTO users(name, age) VALUES(?, ?);"
        assert User.update_sql() == "UPDATE users SET name=?, age=? WHERE id=?;"

    def test_binders_follow_template_order(self):
        user = User("Bob", 41, id=7)
        assert user.insert_values() == ("Bob", 41)
        assert user.update_values() == ("Bob", 41, 7)

    def test_from_row(self):
        assert User.from_row((3, "Carol", 52)) == User("Carol", 52, id=3)

    def test_from_row_null_columns(self):
        assert User.from_row((4, None, None)) == User("", 0, id=4)

    def test_key_property(self):
        user = User("Dan", 20)
        user.key = 12
        assert user.id == 12
        assert user.key == 12


class TestBook:
    """Book mapping."""

    def test_statements(self):
        assert Book.table_name() == "books"
        assert "FOREIGN KEY(user_id) REFERENCES users(id)" in Book.create_table_sql()
        assert Book.create_table_sql().startswith("CREATE TABLE IF NOT EXISTS books(")
        assert Book.insert_sql() == "INSERT INTO books(title, user_id) VALUES(?, ?);"
        assert Book.update_sql() == "UPDATE books SET title=?, user_id=? WHERE id=?;"

    def test_binders_follow_template_order(self):
        book = Book("Dune", 1, id=5)
        assert book.insert_values() == ("Dune", 1)
        assert book.update_values() == ("Dune", 1, 5)

    def test_from_row_null_title(self):
        assert Book.from_row((2, None, 9)) == Book("", 9, id=2)


def test_record_is_abstract():
    with pytest.raises(TypeError):
        Record()
