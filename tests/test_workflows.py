import io
import sqlite3

import pytest

from shopdesk.orders import OrderNotFoundError, get_order_by_id
from shopdesk.workflows import create_order, remove_order, update_order


def make_db():
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        """
        CREATE TABLE clients (id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT);
        CREATE TABLE products (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE orders (id INTEGER PRIMARY KEY, client_id INTEGER,
                             product_id INTEGER, amount INTEGER);
        INSERT INTO clients VALUES (1, 'Ann', 'Lee'), (2, 'Bob', 'Kay');
        INSERT INTO products VALUES (1, 'Apple'), (2, 'Bread');
        INSERT INTO orders VALUES (1, 1, 1, 2), (2, 1, 2, 1), (3, 2, 1, 4);
        """
    )
    return connection


def order_count(connection):
    return connection.execute("SELECT COUNT(*) FROM orders").fetchone()[0]


def test_create_order_stores_selection():
    connection = make_db()
    out = io.StringIO()
    order = create_order(connection, io.StringIO("Apple\n1\nAnn\n1\n3\n"), out)
    assert (order.client_id, order.product_id, order.amount) == (1, 1, 3)
    assert get_order_by_id(connection, order.id) == order
    assert f"Order created successfully with ID: {order.id}" in out.getvalue()


def test_create_order_retries_bad_amount():
    connection = make_db()
    out = io.StringIO()
    order = create_order(connection, io.StringIO("Bread\n2\nBob\n2\n-2\nabc\n5\n"), out)
    assert order.amount == 5
    assert out.getvalue().count("Invalid amount. Please enter a positive integer: ") == 2


def test_create_order_cancelled_at_product():
    connection = make_db()
    before = order_count(connection)
    assert create_order(connection, io.StringIO("Apple\n0\n"), io.StringIO()) is None
    assert order_count(connection) == before


def test_create_order_cancelled_at_client():
    connection = make_db()
    before = order_count(connection)
    result = create_order(connection, io.StringIO("Apple\n1\nAnn\n0\n"), io.StringIO())
    assert result is None
    assert order_count(connection) == before


def test_update_order_changes_amount():
    connection = make_db()
    out = io.StringIO()
    order = update_order(connection, io.StringIO("1\n9\n"), out)
    assert order.amount == 9
    assert get_order_by_id(connection, 1).amount == 9
    assert "Order modified successfully." in out.getvalue()


def test_update_order_cancel():
    connection = make_db()
    out = io.StringIO()
    assert update_order(connection, io.StringIO("0\n"), out) is None
    assert out.getvalue().count("Order selection cancelled.") == 2


def test_update_order_unknown_id():
    with pytest.raises(OrderNotFoundError):
        update_order(make_db(), io.StringIO("99\n5\n"), io.StringIO())


def test_remove_order_deletes_row():
    connection = make_db()
    out = io.StringIO()
    removed = remove_order(connection, io.StringIO("2\n"), out)
    assert removed.id == 2
    assert "Order with ID 2 deleted successfully." in out.getvalue()
    with pytest.raises(OrderNotFoundError):
        get_order_by_id(connection, 2)


def test_remove_order_cancel_keeps_rows():
    connection = make_db()
    before = order_count(connection)
    assert remove_order(connection, io.StringIO("0\n"), io.StringIO()) is None
    assert order_count(connection) == before