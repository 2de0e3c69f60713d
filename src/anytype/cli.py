from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, NoReturn, Optional

import typer
from rich.console import Console

from . import __version__
from .client import AnytypeClient
from .config import AnytypeConfig, clear_api_key, default_config_dir, load_config, save_api_key
from .env import setup_logging
from .errors import AnytypeError, ValidationError
from .types import Object

MAX_PROPERTIES_SHOWN = 5

console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)

app = typer.Typer(
    name="anytype",
    help="Command-line client for the Anytype API.",
    no_args_is_help=True,
    add_completion=False,
)
objects_app = typer.Typer(help="Manage objects in a space.", no_args_is_help=True)
spaces_app = typer.Typer(help="Browse spaces.", no_args_is_help=True)
auth_app = typer.Typer(help="Manage the stored API key.", no_args_is_help=True)
app.add_typer(objects_app, name="objects")
app.add_typer(spaces_app, name="spaces")
app.add_typer(auth_app, name="auth")


@dataclass
class CliState:
    config_dir: Path | None = None
    verbose: bool = False
    config: AnytypeConfig | None = None


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"anytype {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml and the stored API key"
    ),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    ctx.obj = CliState(config_dir=config_dir, verbose=verbose)


def _say(message: str = "") -> None:
    console.print(message)


def _fail(message: str, *, code: int = 1) -> NoReturn:
    _say(f"❌ {message}")
    raise typer.Exit(code=code)


@contextmanager
def _failure_context(context: str) -> Iterator[None]:
    try:
        yield
    except AnytypeError as e:
        _fail(f"{context}: {e}")


def _state(ctx: typer.Context) -> CliState:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, CliState) else CliState()


def _config(ctx: typer.Context) -> AnytypeConfig:
    state = _state(ctx)
    if state.config is None:
        try:
            state.config = load_config(state.config_dir)
        except ValidationError as e:
            _fail(f"Failed to load configuration: {e}", code=2)
        setup_logging(
            "DEBUG" if state.verbose else state.config.log_level,
            state.config.logging_format,
        )
    return state.config


def _client(ctx: typer.Context) -> AnytypeClient:
    config = _config(ctx)
    with _failure_context("Cannot create client"):
        return AnytypeClient(config)


def _parse_properties(raw: str | None) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(str(e)) from e
    if not isinstance(value, dict):
        raise ValidationError("expected a JSON object")
    return value


def _properties_or_fail(raw: str | None) -> dict[str, Any] | None:
    try:
        return _parse_properties(raw)
    except ValidationError as e:
        _fail(f"Failed to parse properties JSON: {e}", code=2)


def _display_name(obj: Object) -> str:
    return obj.name or "Unnamed"


def _print_object_header(obj: Object, indent: str = "  ") -> None:
    _say(f"{indent}📦 Name: {_display_name(obj)}")
    _say(f"{indent}🆔 ID: {obj.id}")
    if obj.space_id:
        _say(f"{indent}🏠 Space: {obj.space_id}")
    if obj.object:
        _say(f"{indent}📋 Type: {obj.object}")


# Objects ------------------------------------------------------------------


@objects_app.command("list", help="List objects in a space.")
def list_objects(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Limit the number of results"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Objects requested per page"),
) -> None:
    client = _client(ctx)
    _say(f"📦 Fetching objects from space '{space_id}'...")
    with client, _failure_context("Failed to fetch objects"):
        all_objects = client.objects.list_all(
            space_id, limit=limit, page_size=page_size or client.config.page_size
        )

    if not all_objects:
        _say("📭 No objects found in this space.")
        return

    _say(f"✅ Found {len(all_objects)} total objects:")
    _say("📊 Pagination Summary:")
    if limit is not None:
        _say(f"  • Requested limit: {limit}")
    _say(f"  • Objects displayed: {len(all_objects)}")
    _say()

    for obj in all_objects:
        _say(f"  📦 {_display_name(obj)} ({obj.id})")
        _say(f"     🆔 ID: {obj.id}")
        if obj.space_id:
            _say(f"     🏠 Space: {obj.space_id}")
        if obj.object:
            _say(f"     📋 Type: {obj.object}")
        if isinstance(obj.properties, dict):
            _say(f"     🔑 Properties: {len(obj.properties)} properties")
        _say()

    _say(f"✅ Displayed {len(all_objects)} objects from space '{space_id}'")


@objects_app.command("get", help="Get details of a specific object.")
def get_object(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID where the object exists"),
    object_id: str = typer.Argument(..., help="Object ID to retrieve"),
) -> None:
    client = _client(ctx)
    _say(f"🔍 Fetching object '{object_id}' from space '{space_id}'...")
    with client, _failure_context("Failed to fetch object"):
        obj = client.objects.get(space_id, object_id)

    _say("✅ Object found:")
    _print_object_header(obj)
    if obj.properties is None:
        _say("  🔑 Properties: None")
        return
    if not isinstance(obj.properties, dict):
        _say(f"  🔑 Properties: {json.dumps(obj.properties, ensure_ascii=False)}")
        return
    _say("  🔑 Properties:")
    for key, value in list(obj.properties.items())[:MAX_PROPERTIES_SHOWN]:
        _say(f"    • {key}: {json.dumps(value, ensure_ascii=False)}")
    if len(obj.properties) > MAX_PROPERTIES_SHOWN:
        _say(f"    ... and {len(obj.properties) - MAX_PROPERTIES_SHOWN} more properties")


@objects_app.command("create", help="Create a new object in a space.")
def create_object(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID where the object will be created"),
    type_key: str = typer.Option(..., "--type-key", "-t", help="Type key for the object"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Object name"),
    properties: Optional[str] = typer.Option(
        None, "--properties", help='Properties in JSON format (e.g. \'{"property":"value"}\')'
    ),
    template_id: Optional[str] = typer.Option(None, "--template-id", help="Template ID to use for the object"),
) -> None:
    props = _properties_or_fail(properties)
    client = _client(ctx)
    _say(f"🏗️ Creating object in space '{space_id}' with type '{type_key}'...")
    with client, _failure_context("Failed to create object"):
        response = client.objects.create(
            space_id,
            type_key=type_key,
            name=name,
            properties=props if props is not None else {},
            template_id=template_id,
        )

    _say("✅ Object created successfully!")
    _print_object_header(response.object)
    if response.markdown is not None:
        _say(f"  📝 Content: {len(response.markdown)} characters")


@objects_app.command("update", help="Update an existing object in a space.")
def update_object(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID where the object exists"),
    object_id: str = typer.Argument(..., help="Object ID to update"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New object name"),
    markdown: Optional[str] = typer.Option(None, "--markdown", help="New markdown body"),
    properties: Optional[str] = typer.Option(
        None, "--properties", help='Properties in JSON format (e.g. \'{"property":"value"}\')'
    ),
) -> None:
    props = _properties_or_fail(properties)
    if name is None and markdown is None and props is None:
        _fail("Nothing to update: pass --name, --markdown or --properties", code=2)
    client = _client(ctx)
    _say(f"🔄 Updating object '{object_id}' in space '{space_id}'...")
    with client, _failure_context("Failed to update object"):
        response = client.objects.update(
            space_id, object_id, name=name, markdown=markdown, properties=props
        )

    _say("✅ Object updated successfully!")
    _print_object_header(response.object)
    if response.markdown is not None:
        _say(f"  📝 Content: {len(response.markdown)} characters")


@objects_app.command("delete", help="Delete (archive) an object in a space.")
def delete_object(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID where the object exists"),
    object_id: str = typer.Argument(..., help="Object ID to delete"),
) -> None:
    client = _client(ctx)
    _say(f"⚠️ Deleting (archiving) object '{object_id}' in space '{space_id}'...")
    _say("📝 Note: This will mark the object as archived, not permanently delete it.")
    with client, _failure_context("Failed to delete object"):
        response = client.objects.delete(space_id, object_id)

    _say("✅ Object deleted (archived) successfully!")
    _print_object_header(response.object)


# Spaces -------------------------------------------------------------------


@spaces_app.command("list", help="List available spaces.")
def list_spaces(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Limit the number of results"),
) -> None:
    client = _client(ctx)
    _say("🏠 Fetching spaces...")
    with client, _failure_context("Failed to fetch spaces"):
        spaces = client.spaces.list_all(limit=limit, page_size=client.config.page_size)

    if not spaces:
        _say("📭 No spaces found.")
        return
    _say(f"✅ Found {len(spaces)} spaces:")
    for space in spaces:
        _say(f"  🏠 {space.name or 'Unnamed'} ({space.id})")


# Auth ---------------------------------------------------------------------


@auth_app.command("set-key", help="Store an API key for later commands.")
def set_key(
    ctx: typer.Context,
    api_key: str = typer.Argument(..., help="API key issued by the Anytype app"),
) -> None:
    state = _state(ctx)
    try:
        path = save_api_key(api_key, state.config_dir)
    except ValidationError as e:
        _fail(str(e), code=2)
    _say(f"✅ API key saved to {path}")


@auth_app.command("status", help="Show whether an API key is configured.")
def status(ctx: typer.Context) -> None:
    config = _config(ctx)
    if not config.api_key:
        _fail("Not authenticated. Run 'anytype auth set-key' first.")
    _say("✅ Authenticated")
    _say(f"  🔑 API key: ...{config.api_key[-4:]}")
    _say(f"  🌐 Base URL: {config.base_url}")


@auth_app.command("logout", help="Remove the stored API key.")
def logout(ctx: typer.Context) -> None:
    state = _state(ctx)
    if clear_api_key(state.config_dir):
        _say("✅ Stored API key removed")
    else:
        _say(f"ℹ️ No stored API key in {state.config_dir or default_config_dir()}")


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        app(args=argv, prog_name="anytype")
    except SystemExit as e:
        if e.code is None:
            return 0
        if isinstance(e.code, int):
            return e.code
        _say(f"❌ {e.code}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
