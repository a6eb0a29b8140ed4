"""Creating, changing, removing and looking up orders."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import TextIO

from shopdesk.database import ShopError

_INSERT_SQL = "INSERT INTO orders (client_id, product_id, amount) VALUES (?, ?, ?);"
_DELETE_SQL = "DELETE FROM orders WHERE id = ?;"
_UPDATE_SQL = (
    "UPDATE orders SET client_id = ?, product_id = ?, amount = ? WHERE id = ?;"
)
_BY_ID_SQL = "SELECT id, client_id, product_id, amount FROM orders WHERE id = ?;"


@dataclass
class Order:
    """An order row: a client buying an amount of a product."""

    id: int = 0
    client_id: int = 0
    product_id: int = 0
    amount: int = 0


class InvalidOrderError(ShopError, ValueError):
    """Raised when order data or an order id fails the sanity checks."""


class OrderNotFoundError(ShopError, LookupError):
    """Raised when no order has the requested id."""


def _check_contents(order: Order | None) -> Order:
    if (
        order is None
        or order.client_id <= 0
        or order.product_id <= 0
        or order.amount <= 0
    ):
        raise InvalidOrderError("Invalid order data provided.")
    return order


def _check_id(order_id: int) -> None:
    if order_id <= 0:
        raise InvalidOrderError("Invalid order ID provided.")


def _write(connection: sqlite3.Connection, sql: str, params: tuple) -> sqlite3.Cursor:
    try:
        with connection:
            return connection.execute(sql, params)
    except sqlite3.Error as exc:
        raise ShopError(f"Error executing statement: {exc}") from exc


def insert_order(connection: sqlite3.Connection, order: Order) -> Order:
    """Insert a new order and set its id to the one the database gave it."""
    _check_contents(order)
    cursor = _write(
        connection, _INSERT_SQL, (order.client_id, order.product_id, order.amount)
    )
    order.id = int(cursor.lastrowid or 0)
    return order


def delete_order(connection: sqlite3.Connection, order_id: int) -> int:
    """Delete the order with the given id; return the number of rows removed."""
    _check_id(order_id)
    cursor = _write(connection, _DELETE_SQL, (order_id,))
    return cursor.rowcount


def modify_order(connection: sqlite3.Connection, order: Order) -> int:
    """Write the client, product and amount of an existing order.

    Returns the number of rows changed.
    """
    _check_contents(order)
    _check_id(order.id)
    cursor = _write(
        connection,
        _UPDATE_SQL,
        (order.client_id, order.product_id, order.amount, order.id),
    )
    return cursor.rowcount


def get_order_by_id(connection: sqlite3.Connection, order_id: int) -> Order:
    """Return the order with the given id.

    Raises InvalidOrderError for an id that is not positive and
    OrderNotFoundError when no such order exists.
    """
    if order_id <= 0:
        raise InvalidOrderError("Invalid order ID provided.")
    try:
        row = connection.execute(_BY_ID_SQL, (order_id,)).fetchone()
    except sqlite3.Error as exc:
        raise ShopError(f"Error executing statement: {exc}") from exc
    if row is None:
        raise OrderNotFoundError(f"No order found with ID {order_id}.")
    return Order(*row)


def format_order(order: Order | None) -> str:
    """Return the one-line description of an order."""
    if order is None:
        return "Order is NULL."
    return (
        f"Order ID: {order.id}, Client ID: {order.client_id}, "
        f"Product ID: {order.product_id}, Amount: {order.amount}"
    )


def _parse_int(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def prompt_for_order(
    connection: sqlite3.Connection, inp: TextIO, out: TextIO
) -> Order | None:
    """Ask the user for an order id and return that order.

    Returns None when the user enters 0 or the input ends. Raises
    OrderNotFoundError when no order has the entered id.
    """
    out.write("Enter order ID (0 to cancel): ")
    while True:
        line = inp.readline()
        if not line:
            out.write("Order selection cancelled.\n")
            return None
        order_id = _parse_int(line)
        if order_id is not None and order_id >= 0:
            break
        out.write("Invalid order ID. Please enter a positive integer: ")

    if order_id == 0:
        out.write("Order selection cancelled.\n")
        return None

    return get_order_by_id(connection, order_id)