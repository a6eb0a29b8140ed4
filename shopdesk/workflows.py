"""Interactive steps that create, change and remove orders."""

from __future__ import annotations

import sqlite3
from typing import TextIO

from shopdesk.clients import prompt_for_client
from shopdesk.orders import (
    Order,
    delete_order,
    format_order,
    insert_order,
    modify_order,
    prompt_for_order,
)
from shopdesk.products import prompt_for_product


def _read_positive(inp: TextIO, out: TextIO) -> int | None:
    """Read lines until one starts with a positive integer; None at end of input."""
    while True:
        line = inp.readline()
        if not line:
            return None
        tokens = line.split()
        if tokens:
            try:
                value = int(tokens[0])
            except ValueError:
                value = 0
            if value > 0:
                return value
        out.write("Invalid amount. Please enter a positive integer: ")


def create_order(connection: sqlite3.Connection, inp: TextIO, out: TextIO) -> Order | None:
    """Let the user pick a product, a client and an amount, then store the order.

    Returns the new order, or None if the user cancels.
    """
    product = prompt_for_product(connection, inp, out)
    if product is None:
        return None
    client = prompt_for_client(connection, inp, out)
    if client is None:
        return None

    out.write("Enter amount for the order: ")
    amount = _read_positive(inp, out)
    if amount is None:
        return None

    order = insert_order(
        connection, Order(client_id=client.id, product_id=product.id, amount=amount)
    )
    out.write(f"Order created successfully with ID: {order.id}\n")
    return order


def update_order(connection: sqlite3.Connection, inp: TextIO, out: TextIO) -> Order | None:
    """Let the user pick an order and give it a new amount.

    Returns the changed order, or None if the user cancels.
    """
    order = prompt_for_order(connection, inp, out)
    if order is None:
        out.write("Order selection cancelled.\n")
        return None

    out.write("\nCurrent order details:\n")
    out.write(format_order(order) + "\n")
    out.write(f"Enter new amount for the order (current: {order.amount}): ")
    amount = _read_positive(inp, out)
    if amount is None:
        return None
    order.amount = amount

    modify_order(connection, order)
    out.write("Order modified successfully.\n")
    return order


def remove_order(connection: sqlite3.Connection, inp: TextIO, out: TextIO) -> Order | None:
    """Let the user pick an order and delete it.

    Returns the deleted order, or None if the user cancels.
    """
    order = prompt_for_order(connection, inp, out)
    if order is None:
        return None
    delete_order(connection, order.id)
    out.write(f"Order with ID {order.id} deleted successfully.\n")
    return order