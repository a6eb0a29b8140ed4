"""Looking up products and letting the user pick one."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import TextIO

from shopdesk.database import ShopError

_MATCH_SQL = "SELECT id, name FROM products WHERE id = ? OR name LIKE '%' || ? || '%';"
_BY_ID_SQL = "SELECT id, name FROM products WHERE id = ?;"


@dataclass
class Product:
    """A product row."""

    id: int = 0
    name: str | None = None


def _query(connection: sqlite3.Connection, sql: str, params: tuple) -> list[tuple]:
    try:
        return connection.execute(sql, params).fetchall()
    except sqlite3.Error as exc:
        raise ShopError(f"Error executing statement: {exc}") from exc


def find_product(
    connection: sqlite3.Connection, product_id: int, name: str
) -> Product | None:
    """Return the first product whose id equals product_id or whose name contains name."""
    rows = _query(connection, _MATCH_SQL, (product_id, name))
    if not rows:
        return None
    row_id, row_name = rows[0]
    return Product(row_id, row_name)


def get_product_by_id(connection: sqlite3.Connection, product_id: int) -> Product | None:
    """Return the product with the given id, or None if there is none."""
    rows = _query(connection, _BY_ID_SQL, (product_id,))
    if not rows:
        return None
    row_id, row_name = rows[0]
    return Product(row_id, row_name)


def match_products(
    connection: sqlite3.Connection, product_id: int, name: str
) -> list[Product]:
    """Return every product whose id equals product_id or whose name contains name."""
    return [
        Product(row_id, row_name)
        for row_id, row_name in _query(connection, _MATCH_SQL, (product_id, name))
    ]


def format_product(product: Product | None) -> str:
    """Return the one-line description of a product."""
    if product is None:
        return "No product data available."
    return f"Product ID: {product.id}, Name: {product.name}"


def _read_line(inp: TextIO) -> str:
    return inp.readline().rstrip("\n")


def _read_int(inp: TextIO) -> int:
    """Read an integer from the next line; anything unreadable counts as 0."""
    tokens = _read_line(inp).split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def _read_choice(inp: TextIO) -> str:
    text = _read_line(inp).strip()
    return text[:1].lower()


def prompt_for_product(
    connection: sqlite3.Connection, inp: TextIO, out: TextIO
) -> Product | None:
    """Ask the user for a product name and let them pick one of the matches.

    Returns the chosen product, or None when the user cancels or no
    product is found.
    """
    out.write("\nSearch for products by name: ")
    search_name = _read_line(inp)

    matches = match_products(connection, 0, search_name)
    for product in matches:
        out.write(format_product(product) + "\n")
    out.write(f"Found {len(matches)} products matching '{search_name}':\n")
    out.write("\nType ID of the product you want to select or 0 to cancel: ")

    product_id = _read_int(inp)
    if product_id == 0:
        out.write("Product selection cancelled.\n")
        return None

    for product in matches:
        if product.id == product_id:
            selected = Product(product.id, product.name)
            out.write("Selected product: " + format_product(selected) + "\n")
            return selected

    out.write(f"Product with ID {product_id} not found in the fetched products.\n")
    out.write("\nDo you want to search the database for this product? (y/n): ")
    choice = _read_choice(inp)
    if choice == "n":
        out.write("Product selection cancelled.\n")
        return None
    if choice != "y":
        return None

    out.write(f"Searching for product with ID {product_id} in the database...\n")
    found = get_product_by_id(connection, product_id)
    if found is None:
        out.write(f"No product found with ID {product_id}.\n")
        return None
    out.write("Found product: " + format_product(found) + "\n")
    return found