"""The interactive menu of the shop order desk."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Callable, TextIO

from shopdesk.database import DEFAULT_DATABASE, ShopError, database_name, open_database
from shopdesk.reports import (
    print_cheapest_offers,
    print_cheapest_shop_per_client,
    print_orders_by_client_order_count,
    print_orders_grouped_by_client,
    print_potential_savings,
)
from shopdesk.workflows import create_order, remove_order, update_order

MAX_OPTION = 8

_MENU = (
    "\n\nMenu:\n"
    "1. Create order\n"
    "2. Modify order\n"
    "3. Delete order\n"
    "4. Print orders grouped by clients\n"
    "5. Print clients by order count\n"
    "6. Print clients' orders with cheapest offer\n"
    "7. Find cheapest shop per client\n"
    "8. Print potential savings per client\n"
    "0. Exit\n"
)

_EXIT_BANNER = (
    "\n==========================================================\n"
    "                        E X I T I N G                     \n"
    "==========================================================\n\n"
)


def display_menu(out: TextIO) -> None:
    """Write the main menu."""
    out.write(_MENU)


def _parse_option(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def get_menu_selection(inp: TextIO, out: TextIO) -> int:
    """Show the menu and read an option from 0 to 8; end of input counts as 0."""
    display_menu(out)
    while True:
        out.write(f"  Select an option (1-{MAX_OPTION}): ")
        line = inp.readline()
        if not line:
            option = 0
            break
        option = _parse_option(line)
        if option is not None and 0 <= option <= MAX_OPTION:
            break
        out.write("  Invalid option. Please select a number between 1 and ... .\n")

    if option == 0:
        out.write(_EXIT_BANNER)
    return option


def run(connection: sqlite3.Connection, inp: TextIO, out: TextIO) -> None:
    """Serve menu selections until the user chooses to exit."""
    actions: dict[int, Callable[[], object]] = {
        1: lambda: create_order(connection, inp, out),
        2: lambda: update_order(connection, inp, out),
        3: lambda: remove_order(connection, inp, out),
        4: lambda: print_orders_grouped_by_client(connection, out),
        5: lambda: print_orders_by_client_order_count(connection, out),
        6: lambda: print_cheapest_offers(connection, out),
        7: lambda: print_cheapest_shop_per_client(connection, out),
        8: lambda: print_potential_savings(connection, out),
    }
    while (option := get_menu_selection(inp, out)) != 0:
        try:
            actions[option]()
        except ShopError as exc:
            print(exc, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Open the shop database and run the menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage shop orders.")
    parser.add_argument(
        "database", nargs="?", default=DEFAULT_DATABASE, help="database file to open"
    )
    args = parser.parse_args(argv)

    try:
        connection = open_database(args.database)
    except ShopError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        print("Database opened successfully in read/write mode.")
        print(f"Database name: '{database_name(connection)}'")
        run(connection, sys.stdin, sys.stdout)
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())