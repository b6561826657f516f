"""
Stash Store CLI — inspect and maintain file stores.

Commands:
    stash store keys               — list stored keys
    stash store get <key>          — print a stored value as JSON
    stash store set <key> <value>  — store a JSON value (or --raw string)
    stash store has <key>          — exit 0 if stored, 1 otherwise
    stash store rm <key>           — remove a key
    stash store clear              — remove every key
    stash store path <key>         — show the file backing a key
"""
from __future__ import annotations

import json
import sys
from typing import Optional

import click

from ..persistence import FileStore, StoreError, open_store


def _open(store_name: str, directory: Optional[str]) -> FileStore:
    if directory:
        return FileStore(directory)
    return open_store(store_name)


def store_options(fn):
    """Shared --store/--dir options."""
    fn = click.option("--dir", "directory", default=None,
                      help="Store directory (overrides --store)")(fn)
    fn = click.option("--store", "-s", "store_name", default="cache", show_default=True,
                      help="Named store from config")(fn)
    return fn


@click.group("store")
def store():
    """Key-value store commands."""
    pass


@store.command("keys")
@store_options
def store_keys(store_name: str, directory: Optional[str]):
    """List stored keys."""
    fs = _open(store_name, directory)
    keys = sorted(fs.keys())
    if not keys:
        click.echo(f"No keys in {fs.directory}")
        return
    for key in keys:
        click.echo(key)


@store.command("get")
@click.argument("key")
@store_options
def store_get(key: str, store_name: str, directory: Optional[str]):
    """Print the value stored under KEY."""
    fs = _open(store_name, directory)
    if not fs.has(key):
        click.echo(f"Error: key not found: {key}", err=True)
        sys.exit(1)
    click.echo(json.dumps(fs.get(key), indent=2))


@store.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--raw", is_flag=True, help="Store VALUE as a plain string")
@store_options
def store_set(key: str, value: str, raw: bool, store_name: str, directory: Optional[str]):
    """Store VALUE (parsed as JSON) under KEY."""
    data = value
    if not raw:
        try:
            data = json.loads(value)
        except ValueError:
            click.echo("Error: VALUE is not valid JSON (use --raw for strings)", err=True)
            sys.exit(1)

    fs = _open(store_name, directory)
    try:
        fs.set(key, data)
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Stored {fs.path_for(key)}")


@store.command("has")
@click.argument("key")
@store_options
def store_has(key: str, store_name: str, directory: Optional[str]):
    """Exit with status 0 if KEY is stored, 1 otherwise."""
    fs = _open(store_name, directory)
    if fs.has(key):
        click.echo("yes")
        return
    click.echo("no")
    sys.exit(1)


@store.command("rm")
@click.argument("key")
@store_options
def store_rm(key: str, store_name: str, directory: Optional[str]):
    """Remove KEY (no error if absent)."""
    fs = _open(store_name, directory)
    fs.remove(key)
    click.echo(f"Removed {key}")


@store.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@store_options
def store_clear(yes: bool, store_name: str, directory: Optional[str]):
    """Remove every key from the store."""
    fs = _open(store_name, directory)
    count = len(fs.keys())
    if count == 0:
        click.echo(f"Nothing to clear in {fs.directory}")
        return
    if not yes:
        click.confirm(f"Remove {count} key(s) from {fs.directory}?", abort=True)
    fs.remove_all()
    click.echo(f"Cleared {count} key(s)")


@store.command("path")
@click.argument("key")
@store_options
def store_path(key: str, store_name: str, directory: Optional[str]):
    """Show the file that backs KEY."""
    click.echo(str(_open(store_name, directory).path_for(key)))
