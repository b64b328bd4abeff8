"""The HTTP application: auth stubs, to-do item endpoints and the main page."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path as FilePath
from typing import Any, Optional

from flask import Flask, Response, request

from . import content_loader
from .items import UnknownItemTypeError, to_do_factory
from .paths import Path
from .processes import process_input
from .serialization import ItemSchema, ToDoItems
from .state import DEFAULT_STATE_FILE, StrPath, read_file
from .token import TokenError, process_token

_JSON = "application/json"


def return_state(state_path: StrPath = DEFAULT_STATE_FILE) -> ToDoItems:
    """Load every stored item and group them by status.

    Raises ValueError if a stored status is not a string, and
    UnknownItemTypeError if it names no known status.
    """
    items = []
    for title, status in read_file(state_path).items():
        if not isinstance(status, str):
            raise ValueError(f"status of {title!r} is not a string")
        items.append(to_do_factory(status, title))
    return ToDoItems.from_items(items)


def _json_text(text: str, status: int = 200) -> Response:
    return Response(text, status=status, mimetype=_JSON)


def _json_message(message: str, status: int) -> Response:
    return _json_text(json.dumps(message, ensure_ascii=False), status)


def _parse_item() -> Optional[ItemSchema]:
    data: Any = request.get_json(silent=True)
    try:
        return ItemSchema.from_mapping(data)
    except ValueError:
        return None


def create_app(state_path: StrPath = DEFAULT_STATE_FILE, root_dir: StrPath = ".") -> Flask:
    """Build the application, storing items in state_path and serving pages from root_dir."""
    root = FilePath(root_dir)
    app = Flask(__name__)

    def state_response() -> Response:
        return _json_text(return_state(state_path).to_json())

    @app.before_request
    def check_token() -> None:
        if "/item/" in request.path:
            try:
                process_token(request.headers)
            except TokenError as error:
                print(f"Token error: {error}")
            else:
                print("Success! The token is approved")

    def login() -> Response:
        return Response("Login View", content_type="text/plain; charset=utf-8")

    def logout() -> Response:
        return Response("Logout View", content_type="text/plain; charset=utf-8")

    def create(title: str) -> Response:
        state = read_file(state_path)
        process_input(to_do_factory("pending", title), "create", state, state_path)
        return state_response()

    def get() -> Response:
        return state_response()

    def edit() -> Response:
        schema = _parse_item()
        if schema is None:
            return Response("invalid item body", status=400, mimetype="text/plain")
        state = read_file(state_path)
        if schema.title not in state:
            return _json_message(f"{schema.title} not found in state", 404)
        status = json.dumps(state[schema.title], ensure_ascii=False).replace('"', "")
        if status == schema.status:
            return state_response()
        try:
            item = to_do_factory(status, schema.title)
        except UnknownItemTypeError:
            return _json_message(f"{status} not accepted", 400)
        process_input(item, "edit", state, state_path)
        return state_response()

    def delete() -> Response:
        schema = _parse_item()
        if schema is None:
            return Response("invalid item body", status=400, mimetype="text/plain")
        state = read_file(state_path)
        try:
            item = to_do_factory(schema.status, schema.title)
        except UnknownItemTypeError:
            return _json_message(f"{schema.status} not accepted", 400)
        process_input(item, "delete", state, state_path)
        return state_response()

    def items_page() -> Response:
        html_data = content_loader.read_file(root / "templates" / "main.html")
        javascript_data = content_loader.read_file(root / "javascript" / "main.js")
        css_data = content_loader.read_file(root / "css" / "main.css")
        base_css_data = content_loader.read_file(root / "css" / "base.css")

        html_data = html_data.replace("{{JAVASCRIPT}}", javascript_data)
        html_data = html_data.replace("{{CSS}}", css_data)
        html_data = html_data.replace("{{BASE_CSS}}", base_css_data)
        html_data = content_loader.add_component(
            "header", html_data, root / "templates" / "components"
        )
        return Response(html_data, content_type="text/html; charset=utf-8")

    auth = Path("/auth")
    app.add_url_rule(auth.define("/login"), "login", login, methods=["GET"])
    app.add_url_rule(auth.define("/logout"), "logout", logout, methods=["GET"])

    item = Path("/item")
    app.add_url_rule(item.define("/create/<title>"), "create", create, methods=["POST"])
    app.add_url_rule(item.define("/get"), "get", get, methods=["GET"])
    app.add_url_rule(item.define("/edit"), "edit", edit, methods=["PUT"])
    app.add_url_rule(item.define("/delete"), "delete", delete, methods=["POST"])

    page = Path("/")
    app.add_url_rule(page.define(""), "items", items_page, methods=["GET"])

    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Start the server."""
    parser = argparse.ArgumentParser(description="Serve the to-do application.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--state", default=DEFAULT_STATE_FILE, help="path of the state file")
    parser.add_argument("--root", default=".", help="directory holding templates, css and javascript")
    args = parser.parse_args(argv)
    create_app(args.state, args.root).run(host=args.host, port=args.port)