"""Printed reports over clients, orders, offers and shops."""

from __future__ import annotations

import sqlite3
from itertools import groupby
from typing import Iterable, TextIO

from shopdesk.database import ShopError

_RULE = "─" * 40
_DOUBLE_RULE = "═" * 40

_GROUPED_SQL = (
    "SELECT cl.id, cl.first_name, cl.last_name, o.id, o.product_id, o.amount, prd.name "
    "FROM orders AS o "
    "LEFT JOIN clients AS cl ON cl.id = o.client_id "
    "LEFT JOIN products AS prd ON prd.id = o.product_id "
    "GROUP BY cl.id, prd.id "
    "ORDER BY cl.last_name ASC, cl.first_name ASC;"
)

_BY_COUNT_SQL = (
    "SELECT cl.id, cl.first_name, cl.last_name, "
    "o.id as order_id, o.product_id, o.amount, p.name as product_name, "
    "(SELECT COUNT(*) FROM orders WHERE client_id = cl.id) as orderCount "
    "FROM clients AS cl "
    "INNER JOIN orders o ON cl.id = o.client_id "
    "LEFT JOIN products p ON o.product_id = p.id "
    "ORDER BY orderCount DESC, cl.last_name ASC, cl.first_name ASC, o.id ASC;"
)

_CHEAPEST_OFFERS_SQL = (
    "SELECT cl.id, cl.first_name, cl.last_name, prd.name, "
    "off.product_id AS product_id, off.id AS offer_id, "
    "off.price, o.id AS order_id, o.amount, sh.name "
    "FROM clients AS cl "
    "INNER JOIN orders AS o ON o.client_id = cl.id "
    "LEFT JOIN products AS prd ON prd.id = o.product_id "
    "LEFT JOIN offers AS off ON off.product_id = prd.id "
    "LEFT JOIN shops AS sh ON sh.id = off.shop_id "
    "WHERE off.price = ("
    "    SELECT MIN(price) FROM offers WHERE product_id = prd.id"
    ") "
    "ORDER BY cl.last_name ASC, cl.first_name ASC, o.id ASC;"
)

_SHOP_TOTALS_SQL = (
    "SELECT cl.id AS client_id, cl.first_name, cl.last_name, sh.id AS shop_id, "
    "SUM(off.price * o.amount) AS total_cost_for_shop, "
    "sh.name AS shop_name, COUNT(o.id) AS orders_count "
    "FROM clients AS cl "
    "INNER JOIN orders AS o ON o.client_id = cl.id "
    "LEFT JOIN products AS prd ON prd.id = o.product_id "
    "LEFT JOIN offers AS off ON off.product_id = prd.id "
    "LEFT JOIN shops AS sh ON sh.id = off.shop_id "
    "GROUP BY sh.id, cl.id "
    "ORDER BY cl.id "
)


def _rows(connection: sqlite3.Connection, sql: str) -> list[tuple]:
    try:
        return connection.execute(sql).fetchall()
    except sqlite3.Error as exc:
        raise ShopError(f"Error executing statement: {exc}") from exc


def _int(value: object) -> int:
    return 0 if value is None else int(value)  # type: ignore[arg-type]


def _float(value: object) -> float:
    return 0.0 if value is None else float(value)  # type: ignore[arg-type]


def _text(value: object) -> str:
    return "(null)" if value is None else str(value)


def print_orders_grouped_by_client(connection: sqlite3.Connection, out: TextIO) -> None:
    """Print every order under the client who placed it, sorted by client name."""
    rows = _rows(connection, _GROUPED_SQL)
    out.write("\n=== Orders Grouped by Clients ===\n")
    current = -1
    for client_id, first, last, order_id, product_id, amount, product_name in rows:
        client_id = _int(client_id)
        if client_id != current:
            if current != -1:
                out.write("\n")
            out.write(f"Client ID: {client_id}, Name: {_text(first)} {_text(last)}\n")
            out.write(_RULE + "\n")
            current = client_id
        out.write(
            f"    Order ID {_int(order_id):<3d}: {_text(product_name)} "
            f"(ID {_int(product_id):<3d}) Amount: {_int(amount)}\n"
        )


def print_orders_by_client_order_count(connection: sqlite3.Connection, out: TextIO) -> None:
    """Print clients with their orders, those with the most orders first."""
    rows = _rows(connection, _BY_COUNT_SQL)
    out.write("\n=== Clients by order count ===\n")
    current = -1
    total = 0
    for row in rows:
        client_id, first, last, order_id, product_id, amount, product_name, count = row
        client_id = _int(client_id)
        if client_id != current:
            if current != -1:
                out.write("\n")
            current = client_id
            out.write(
                f"Client ID {client_id}: {first if first is not None else 'N/A'} "
                f"{last if last is not None else 'N/A'} ({_int(count)} orders)\n"
            )
            out.write(_RULE + "\n")
        name = product_name if product_name is not None else "Unknown Product"
        out.write(
            f"  Order ID {_int(order_id):<3d}: {name} "
            f"(ID: {_int(product_id):<3d}) Amount: {_int(amount)}\n"
        )
        total += 1

    if current == -1:
        out.write("No orders found in the database.\n")
    else:
        out.write("\n" + _DOUBLE_RULE + "\n")
        out.write(f"Total orders displayed: {total}\n")


def print_cheapest_offers(connection: sqlite3.Connection, out: TextIO) -> None:
    """Print, for every client order, the offers at the lowest price for its product."""
    rows = _rows(connection, _CHEAPEST_OFFERS_SQL)
    out.write("\n=== Cheapest Offers for All Orders ===\n")
    current_client = -1
    current_order = -1
    for row in rows:
        (client_id, first, last, product_name, product_id,
         offer_id, price, order_id, amount, shop_name) = row
        client_id = _int(client_id)
        order_id = _int(order_id)
        if client_id != current_client:
            if current_client != -1:
                out.write("\n")
            out.write(f"Client ID: {client_id}, Name: {_text(first)} {_text(last)}\n")
            out.write(_RULE + "\n")
            current_client = client_id
        if order_id != current_order:
            if current_order != -1:
                out.write("\n")
            out.write(f"    Order ID: {order_id}\n")
            current_order = order_id
        shop = shop_name if shop_name is not None else "Unknown"
        out.write(
            f"        Product '{_text(product_name)}' (ID {_int(product_id):<3d}) - "
            f"Offer ID: {_int(offer_id):<3d} at Price: {_float(price):.2f} "
            f"from Shop: {shop} Amount: {_int(amount)}\n"
        )


def _shop_totals(connection: sqlite3.Connection) -> Iterable[tuple[int, list[tuple]]]:
    """Yield each client id with its rows of per-shop totals."""
    rows = _rows(connection, _SHOP_TOTALS_SQL)
    for client_id, group in groupby(rows, key=lambda row: _int(row[0])):
        yield client_id, list(group)


def print_cheapest_shop_per_client(connection: sqlite3.Connection, out: TextIO) -> None:
    """Print the shop where each client's whole order list costs the least."""
    out.write("\n=== Cheapest Shop per Client ===\n")
    for client_id, group in _shop_totals(connection):
        first, last = group[0][1], group[0][2]
        best = min(group, key=lambda row: _float(row[4]))
        out.write(
            f"Best shop for client {_text(first)} {_text(last)} (ID {client_id}): "
            f"Shop ID {_int(best[3])} ({_float(best[4]):.2f} €): {_text(best[5])}\n"
        )


def print_potential_savings(connection: sqlite3.Connection, out: TextIO) -> None:
    """Print how much each client saves at the cheapest shop against the dearest."""
    out.write("\n=== Potential savings per client (best price vs wors price) ===\n")
    lines = []
    for client_id, group in _shop_totals(connection):
        first, last = group[0][1], group[0][2]
        best = min(group, key=lambda row: _float(row[4]))
        worst = max(group, key=lambda row: _float(row[4]))
        savings = _float(worst[4]) - _float(best[4])
        lines.append(
            f"Client {_text(first)} {_text(last)} (ID {client_id}) could save "
            f"{savings:.2f} € by choosing shop ID {_int(best[3])} ({_text(best[5])}) "
            f"instead of shop ID {_int(worst[3])} ({_text(worst[5])})\n"
        )
    out.write("\n".join(lines))