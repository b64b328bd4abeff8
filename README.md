# todo-service

A small HTTP service that keeps a list of to-do items in a JSON file. Each
item has a title and a status, which is either `pending` or `done`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
todo-service
```

By default the server listens on `127.0.0.1:8000`, keeps its items in
`./state.json` and serves its front end from the current directory. The
command takes these options:

| Option    | Default        | Meaning                                              |
|-----------|----------------|------------------------------------------------------|
| `--host`  | `127.0.0.1`    | Address to listen on                                 |
| `--port`  | `8000`         | Port to listen on                                    |
| `--state` | `./state.json` | Path of the state file                               |
| `--root`  | `.`            | Directory holding `templates`, `css` and `javascript`|

The state file is a JSON object mapping each item's title to its status:

```json
{"washing": "pending", "shopping": "done"}
```

The file must exist and hold a JSON object (it may be `{}`) before any item
route is used; it is rewritten with sorted keys whenever an item changes.

## Routes

| Method | Path                   | Body                                | What it does                         |
|--------|------------------------|-------------------------------------|--------------------------------------|
| GET    | `/`                    |                                     | The HTML front end                   |
| GET    | `/auth/login`          |                                     | Returns the text `Login View`        |
| GET    | `/auth/logout`         |                                     | Returns the text `Logout View`       |
| POST   | `/item/create/<title>` |                                     | Adds a pending item with that title  |
| GET    | `/item/get`            |                                     | Lists all items                      |
| PUT    | `/item/edit`           | `{"title": "...", "status": "..."}` | Toggles an item between pending/done |
| POST   | `/item/delete`         | `{"title": "...", "status": "..."}` | Removes an item                      |

Item routes answer with the current state, grouped by status:

```json
{
  "pending_items": [{"title": "washing", "status": "pending"}],
  "done_items": [{"title": "shopping", "status": "done"}],
  "pending_item_count": 1,
  "done_item_count": 1
}
```

`/item/edit` looks up the title's stored status. If the title is missing it
answers 404; if the stored status already equals the one sent, nothing
changes; otherwise a `pending` item becomes `done` and a `done` item becomes
`pending`. It answers 400 when the stored status is neither `pending` nor
`done`. `/item/delete` answers 400 when the status sent is neither `pending`
nor `done`. Both answer 400 when the body is not a JSON object with string
`title` and `status` fields.

Requests under `/item/` are checked for a `user-token` header whose value
is `token`. The outcome of the check is only printed to the console; the
request is served either way.

## Using it from Python

```python
from todo_service.views import create_app

app = create_app("state.json", ".")
app.run(host="127.0.0.1", port=8000)
```

The second argument is the directory holding the front end's files:
`templates/main.html`, `templates/components/header.html`,
`templates/components/header.css`, `javascript/main.js`, `css/main.css`
and `css/base.css`. In `main.html` the markers `{{JAVASCRIPT}}`, `{{CSS}}`,
`{{BASE_CSS}}`, `HEADER_HTML` and `HEADER_CSS` are replaced by those files.

The building blocks are usable on their own:

- `todo_service.state.read_file` and `write_to_file` load and save the state.
- `todo_service.items.to_do_factory` builds `Pending` or `Done` items and
  raises `UnknownItemTypeError` for any other status.
- `todo_service.processes.process_input` applies a command (`get`, `create`,
  `delete`, `edit`) to a copy of the state, saves it and returns the copy;
  `create` is accepted only for pending items, and an unknown command raises
  `ValueError`.
- `todo_service.serialization.ToDoItems` groups items by status for output,
  and `ItemSchema.from_mapping` validates a request body.
- `todo_service.views.return_state` loads the state file as a `ToDoItems`.
- `todo_service.token.process_token` checks the `user-token` header and
  raises `TokenError` when it is missing or wrong.

## What it does not do

There are no user accounts: the login and logout routes return fixed text,
and the token check never refuses a request. The front end's HTML, CSS and
JavaScript files are not part of the package and must be supplied in the
`--root` directory.