"""Looking up clients and letting the user pick one."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import TextIO

from shopdesk.database import ShopError

_MATCH_SQL = (
    "SELECT id, first_name, last_name FROM clients "
    "WHERE id = ? OR first_name LIKE '%' || ? || '%' OR last_name LIKE '%' || ? || '%';"
)
_BY_ID_SQL = "SELECT id, first_name, last_name FROM clients WHERE id = ?;"


@dataclass
class Client:
    """A client row."""

    id: int = 0
    first_name: str | None = None
    last_name: str | None = None


def _query(connection: sqlite3.Connection, sql: str, params: tuple) -> list[tuple]:
    try:
        return connection.execute(sql, params).fetchall()
    except sqlite3.Error as exc:
        raise ShopError(f"Error executing statement: {exc}") from exc


def find_client(
    connection: sqlite3.Connection, client_id: int, first_name: str, last_name: str
) -> Client | None:
    """Return the first client matching the id or containing either name part."""
    rows = _query(connection, _MATCH_SQL, (client_id, first_name, last_name))
    if not rows:
        return None
    return Client(*rows[0])


def get_client_by_id(connection: sqlite3.Connection, client_id: int) -> Client | None:
    """Return the client with the given id, or None if there is none."""
    rows = _query(connection, _BY_ID_SQL, (client_id,))
    if not rows:
        return None
    return Client(*rows[0])


def match_clients(
    connection: sqlite3.Connection, client_id: int, first_name: str, last_name: str
) -> list[Client]:
    """Return every client matching the id or containing either name part."""
    return [
        Client(*row)
        for row in _query(connection, _MATCH_SQL, (client_id, first_name, last_name))
    ]


def split_name(text: str) -> tuple[str, str]:
    """Split a search text at its first space into first and last name.

    Without a space, the whole text is used for both parts.
    """
    first, sep, last = text.partition(" ")
    if not sep:
        return text, text
    return first, last


def format_client(client: Client | None) -> str:
    """Return the one-line description of a client."""
    if client is None:
        return "No client data available."
    return f"Client ID: {client.id}, Name: {client.first_name} {client.last_name}"


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
    return _read_line(inp).strip()[:1].lower()


def prompt_for_client(
    connection: sqlite3.Connection, inp: TextIO, out: TextIO
) -> Client | None:
    """Ask the user for a client name and let them pick one of the matches.

    Returns the chosen client, or None when the user cancels or no
    client is found.
    """
    out.write(
        "Enter name of client to search for "
        "(separate by space if seaching for both first and last name):\n>> "
    )
    first_name, last_name = split_name(_read_line(inp))

    matches = match_clients(connection, 0, first_name, last_name)
    for client in matches:
        out.write(format_client(client) + "\n")
    out.write(f"Found {len(matches)} clients matching '{first_name} {last_name}':\n")
    out.write("Type ID of the client you want to select or 0 to cancel: ")

    client_id = _read_int(inp)
    if client_id == 0:
        out.write("Client selection cancelled.\n")
        return None

    for client in matches:
        if client.id == client_id:
            selected = Client(client.id, client.first_name, client.last_name)
            out.write("Selected Client: " + format_client(selected) + "\n")
            return selected

    out.write(f"Client with ID {client_id} not found in the fetched clients.\n")
    out.write("Do you want to search the database for this client? (y/n): ")
    choice = _read_choice(inp)
    if choice == "n":
        out.write("Client selection cancelled.\n")
        return None
    if choice != "y":
        return None

    out.write(f"Searching for client with ID {client_id} in the database...\n")
    found = get_client_by_id(connection, client_id)
    if found is None:
        out.write(f"No client found with ID {client_id}.\n")
        return None
    out.write("Found client: " + format_client(found) + "\n")
    return found