# shopdesk

A small interactive console for working with a shop database kept in SQLite.
It creates, changes and deletes orders, and prints reports about clients,
their orders and the cheapest offers across shops. It uses only the Python
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The database

The program works on an existing SQLite file. By default this is `shop2.db`
in the current directory; another path can be given on the command line.
The file is opened for reading and writing and is never created. If it does
not exist, or cannot be written to, the program prints an error and exits
with status 1.

It expects these tables:

- `clients` (`id`, `first_name`, `last_name`)
- `products` (`id`, `name`)
- `shops` (`id`, `name`)
- `offers` (`id`, `product_id`, `shop_id`, `price`)
- `orders` (`id`, `client_id`, `product_id`, `amount`)

## Usage

```
shopdesk              # opens shop2.db in the current directory
shopdesk path/to.db   # opens the given file
```

After reporting that the database was opened, a menu appears:

```
1. Create order
2. Modify order
3. Delete order
4. Print orders grouped by clients
5. Print clients by order count
6. Print clients' orders with cheapest offer
7. Find cheapest shop per client
8. Print potential savings per client
0. Exit
```

Entering 0, or reaching the end of input, leaves the program. A number
outside 0–8 asks again.

- **Create order**: search for a product by part of its name, then for a
  client. For a client, type one name (matched against both first and last
  name), or a first and a last name separated by a space. Pick an ID from the
  matches; 0 cancels. If the ID is not among the matches you are asked
  whether to look it up in the whole database (`y`/`n`). Finally enter a
  positive amount.
- **Modify order**: enter an order ID (0 cancels), then a new positive amount.
- **Delete order**: enter an order ID (0 cancels).
- **Reports 4–8** print to the console. Reports 7 and 8 total, per client and
  shop, the price of each ordered product times its amount, and show the
  cheapest shop, or the difference between the dearest and cheapest shop.

Errors during an action, such as an order ID that does not exist, are
written to standard error and the menu is shown again.

## Library use

The modules can be used on their own with a `sqlite3.Connection`:

- `shopdesk.database`: `open_database(path)` opens an existing file for
  reading and writing and raises `ShopError` if that fails;
  `database_name(connection)` returns the name of the main database.
- `shopdesk.products`: `Product`, `find_product`, `get_product_by_id`,
  `match_products`, `format_product`, `prompt_for_product`.
- `shopdesk.clients`: `Client`, `find_client`, `get_client_by_id`,
  `match_clients`, `split_name`, `format_client`, `prompt_for_client`.
- `shopdesk.orders`: `Order`, `insert_order` (sets the new id),
  `modify_order` and `delete_order` (return the number of rows affected),
  `get_order_by_id`, `format_order`, `prompt_for_order`. Invalid data or
  non-positive ids raise `InvalidOrderError`; a missing order raises
  `OrderNotFoundError`. Both are `ShopError`s.
- `shopdesk.reports`: `print_orders_grouped_by_client`,
  `print_orders_by_client_order_count`, `print_cheapest_offers`,
  `print_cheapest_shop_per_client` and `print_potential_savings`, each
  taking `(connection, out)` and writing to any text stream.
- `shopdesk.workflows`: `create_order`, `update_order` and `remove_order`,
  the interactive steps behind menu entries 1–3, taking
  `(connection, inp, out)`.
- `shopdesk.cli`: `display_menu(out)`, `get_menu_selection(inp, out)`,
  `run(connection, inp, out)` for the menu loop on given streams, and
  `main(argv=None)` for the command.

The interactive functions read from `inp` and write to `out`, so they can be
driven with `io.StringIO` objects.

## What it does not do

shopdesk does not create the database or its tables, and it has no way to
add, change or remove clients, products, shops or offers. Those must already
be in the database; only orders are managed here.