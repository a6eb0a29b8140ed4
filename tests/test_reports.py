import io
import sqlite3

import pytest

from shopdesk.database import ShopError
from shopdesk.reports import (
    print_cheapest_offers,
    print_cheapest_shop_per_client,
    print_orders_by_client_order_count,
    print_orders_grouped_by_client,
    print_potential_savings,
)


def make_db(with_orders=True):
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        """
        CREATE TABLE clients (id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT);
        CREATE TABLE products (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE shops (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE offers (id INTEGER PRIMARY KEY, product_id INTEGER,
                             shop_id INTEGER, price REAL);
        CREATE TABLE orders (id INTEGER PRIMARY KEY, client_id INTEGER,
                             product_id INTEGER, amount INTEGER);
        INSERT INTO clients VALUES (1, 'Ann', 'Lee'), (2, 'Bob', 'Kay'), (3, 'Cid', 'Zed');
        INSERT INTO products VALUES (1, 'Apple'), (2, 'Bread');
        INSERT INTO shops VALUES (1, 'Alpha'), (2, 'Beta');
        INSERT INTO offers VALUES (1, 1, 1, 1.0), (2, 1, 2, 2.0),
                                  (3, 2, 1, 5.0), (4, 2, 2, 4.0);
        """
    )
    if with_orders:
        connection.executescript(
            "INSERT INTO orders VALUES (1, 1, 1, 2), (2, 1, 2, 1), (3, 2, 1, 4);"
        )
    return connection


def test_grouped_orders_sorted_by_last_name():
    out = io.StringIO()
    print_orders_grouped_by_client(make_db(), out)
    text = out.getvalue()
    assert "=== Orders Grouped by Clients ===" in text
    assert text.index("Bob Kay") < text.index("Ann Lee")
    assert "Zed" not in text


def test_grouped_orders_list_every_order():
    out = io.StringIO()
    print_orders_grouped_by_client(make_db(), out)
    order_lines = [line for line in out.getvalue().splitlines() if "Order ID" in line]
    assert len(order_lines) == 3


def test_order_count_puts_busiest_client_first():
    out = io.StringIO()
    print_orders_by_client_order_count(make_db(), out)
    text = out.getvalue()
    assert text.index("Ann Lee") < text.index("Bob Kay")
    assert "Total orders displayed: 3" in text


def test_order_count_without_orders():
    out = io.StringIO()
    print_orders_by_client_order_count(make_db(with_orders=False), out)
    assert "No orders found in the database." in out.getvalue()


def test_cheapest_offers_pick_lowest_price():
    out = io.StringIO()
    print_cheapest_offers(make_db(), out)
    lines = out.getvalue().splitlines()
    bread = [line for line in lines if "Product 'Bread'" in line]
    apple = [line for line in lines if "Product 'Apple'" in line]
    assert len(bread) == 1
    assert bread[0].rstrip().endswith("Amount: 1")
    assert "from Shop: Beta" in bread[0]
    assert all("from Shop: Alpha" in line for line in apple)
    assert len(apple) == 2


def test_cheapest_shop_per_client():
    out = io.StringIO()
    print_cheapest_shop_per_client(make_db(), out)
    lines = [line for line in out.getvalue().splitlines() if line.startswith("Best shop")]
    assert len(lines) == 2
    assert all(line.endswith("Alpha") for line in lines)
    assert "(7.00 €)" in lines[0]


def test_potential_savings_compares_best_and_worst():
    out = io.StringIO()
    print_potential_savings(make_db(), out)
    text = out.getvalue()
    lines = [line for line in text.splitlines() if "could save" in line]
    assert len(lines) == 2
    assert all("shop ID 1 (Alpha) instead of shop ID 2 (Beta)" in line for line in lines)
    assert text.endswith("(Beta)\n")


def test_missing_tables_raise():
    out = io.StringIO()
    with pytest.raises(ShopError):
        print_orders_grouped_by_client(sqlite3.connect(":memory:"), out)