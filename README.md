# ssixwallet

The data side of an SSIX wallet front end, with no user interface. It has the lists, tables and rules that the wallet's views and dialogs work from. Only the standard library is needed.

## Modules

### `ssixwallet.nodes`

- `NodeSetting` is a frozen record of a remote daemon. Its fields are `host`, `port`, `path` (default `"/"`) and `ssl` (default `False`).
- `ConnectionMode` is an enum of the ways the wallet can reach a daemon: `auto`, `embedded`, `local` and `remote`.
- `NodeList` is an ordered list of nodes with one of them marked current.
  - It supports `len`, indexing and iteration.
  - `add` and `remove` pass the new list to the optional `on_change` callback, so the caller can persist it.
  - `index_of` raises `ValueError` when the node is not in the list.
  - `set_current` marks a row as current, and `is_checked` tells whether a row is the current one.
  - `display(row, column)` gives the host for column 1, the port for column 2 and the path for column 3.
- `is_valid_node` checks a node entered by the user. The host must be letters, digits, dots and single hyphens. The port must be between 1 and 65534. The path must be `/` or a form like `/a/b/`.
- `toggle_ssl_port(port, ssl)` moves a port up or down by 100 when SSL is switched on or off.
- `effective_local_port` returns the port it is given, or `DEFAULT_RPC_PORT` (32348) when the port is 0.

### `ssixwallet.address_book`

`AddressBook(path)` keeps `Contact` entries in memory. Each contact has a `label`, an `address` and a `payment_id`.

- `load()` reads a JSON array from the file. A missing or invalid file leaves the book unchanged.
- `add()` and `remove()` write the whole book back as compact JSON, with the keys `label`, `address` and `paymentid`. Rows out of range are ignored by `remove()`.
- `reset()` clears memory only. It does not touch the file.
- `display(row, column)` gives the text of one cell.
- `find(text, column)` returns the first row whose cell matches the text exactly, or `None`.
- `Column` and `header()` describe the table columns.

### `ssixwallet.connections`

`ConnectionsTable` holds `P2PConnection` rows. `refresh()` replaces all of them. `display(row, column)` gives the text of one cell:

- the state label, from `state_label()`;
- the connection id;
- the dotted IPv4 host;
- the port;
- the start time in local time, as `dd.MM.yy HH:mm`, from `format_start()`;
- the version;
- `Incoming` or `Outgoing`;
- the heights.

The module also has `ConnectionState`, `Column` and `header()`.

### `ssixwallet.outputs`

`OutputsTable(amount_formatter)` merges spent and unspent `TransactionOutput` objects and sorts them by global output index.

- `reload(unspent, spent)` fills the table. The spending details of unspent outputs are cleared.
- `display(row, column)` and `tooltip(row)` give the cell text, including `Pending`, `Unconfirmed` and `-`.

Helpers for the coins view:

- `state_filter_value` maps a `StateFilter` choice to -1 (all), 0 (spent) or 1 (unspent).
- `selected_amount` adds up displayed amount strings. It drops commas, and text that is not a number counts as 0.
- `outputs_to_send` keeps only the outputs that are not spent.

The module also has `OutputType`, `OutputState`, `Column` and `header()`.

### `ssixwallet.optimization`

Choices for the optimization (fusion) scheduler:

- `optimization_periods()` lists the intervals, from 30 minutes to 6 hours in half-hour steps.
- `normalize_interval()` falls back to 30 minutes for an interval that is not in the list.
- `threshold_options(ticker)` gives the threshold choices, from 1 to 10000 coins.
- `threshold_from_order` and `order_from_threshold` convert between a threshold and its order of magnitude.
- `estimate_text()` describes how many outputs are left to optimize.

### `ssixwallet.widgets`

- `SpriteAnimator` steps through the frames of a vertical sprite strip and wraps at the end.
  - `tick()` returns the rectangle of the frame to show.
  - `interval_ms()` returns the time between frames.
- `RecordNavigator` moves back and forth through table rows. It has `previous`, `next`, `can_go_back` and `can_go_forward`.
- Text helpers for the node info view: `connections_summary`, `peer_list_text`, `height_text` and `peer_address`.

### `ssixwallet.dialogs`

- `language_name(code)` gives the name of the mnemonic word list for an interface language code. Unknown codes give English.
- `ensure_wallet_suffix` adds `.wallet` to a chosen path.
- `confirm_send_title`, `payment_id_text` and `no_payment_id_text` give the texts of the send confirmation dialog.
- `proof_amount(amount, balance)` picks the amount a balance proof is made for.
- `KeyImport.from_input` trims an entered key and path. It checks that the sync height fits in 32 bits and raises `ValueError` if it does not.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ssixwallet.address_book import AddressBook
from ssixwallet.nodes import NodeSetting, is_valid_node

book = AddressBook("contacts.json")
book.load()
book.add("Alice", "SSIXexampleaddress", "")
print(len(book), book.display(0, 0))

node = NodeSetting(host="node.example.com", port=16000, path="/", ssl=False)
print(is_valid_node(node))
```

## What it does not do

This package does not include:

- any windows or widgets;
- a command to run;
- a connection to a daemon or to the peer-to-peer network;
- wallet files, keys or signing;
- the settings storage behind the node list.

The caller supplies the data, for example the connections and outputs reported by a node or wallet, and persists the node list through the `on_change` callback. The only thing the package writes to disk itself is the address book file.