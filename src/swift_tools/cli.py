"""Command-line interface for swift-tools.

This module provides a CLI for container operations against a Swift
storage account.

Commands:
    - list: List containers (names, or details with --full)
    - create: Create a container, optionally with metadata
    - delete: Delete a container
    - update: Set or change container metadata
    - show: Show container usage and metadata

The storage URL and auth token default to the SWIFT_TOOLS_STORAGE_URL and
SWIFT_TOOLS_AUTH_TOKEN environment variables.
"""

from typing import Annotated, NoReturn, Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .cli_params import (
    AuthTokenOption,
    ContainerNameArgument,
    HeaderOption,
    MetadataOption,
    ParamOption,
    StorageUrlOption,
    TimeoutOption,
    parse_key_value_pairs,
)
from .core.exceptions import SwiftToolsError
from .objectstorage import (
    ServiceClient,
    create_container,
    delete_container,
    extract_info,
    extract_metadata,
    extract_names,
    get_container,
    list_containers,
    update_container,
)
from .schemas import CreateOpts, DeleteOpts, GetOpts, ListOpts, UpdateOpts

app = typer.Typer(
    name="swift-tools",
    help="Manage containers in Swift-compatible object storage.",
    no_args_is_help=True,
)

CLI_ERRORS = (SwiftToolsError, PydanticValidationError)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"swift-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Swift-Tools: container operations for Swift object storage.
    """
    pass


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _service_client(
    storage_url: Optional[str], auth_token: Optional[str], timeout: Optional[float]
) -> ServiceClient:
    return ServiceClient.from_settings(
        endpoint=storage_url, auth_token=auth_token, timeout=timeout
    )


@app.command("list")
def list_cmd(
    full: Annotated[
        bool, typer.Option("--full", help="Show object count and bytes per container")
    ] = False,
    param: ParamOption = None,
    storage_url: StorageUrlOption = None,
    auth_token: AuthTokenOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    List the containers of the account.

    Examples:
        swift-tools list
        swift-tools list --full --param prefix=logs-
    """
    try:
        client = _service_client(storage_url, auth_token, timeout)
        opts = ListOpts(full=full, params=parse_key_value_pairs(param, "--param"))

        lines = []
        with list_containers(client, opts) as pager:
            for page in pager:
                if full:
                    lines.extend(
                        f"{info.name}\t{info.count:,}\t{info.bytes:,}"
                        for info in extract_info(page)
                    )
                else:
                    lines.extend(extract_names(page))
    except CLI_ERRORS as e:
        _fail(e)

    if lines:
        typer.echo(f"Found {len(lines)} containers:")
        for line in lines:
            typer.echo(f"  {line}")
    else:
        typer.echo("No containers found.")


@app.command("create")
def create_cmd(
    name: ContainerNameArgument,
    meta: MetadataOption = None,
    header: HeaderOption = None,
    storage_url: StorageUrlOption = None,
    auth_token: AuthTokenOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Create a container.

    Examples:
        swift-tools create photos --meta owner=alice
        swift-tools create public --header X-Container-Read=.r:*
    """
    try:
        client = _service_client(storage_url, auth_token, timeout)
        container = create_container(
            client,
            CreateOpts(
                name=name,
                headers=parse_key_value_pairs(header, "--header"),
                metadata=parse_key_value_pairs(meta, "--meta"),
            ),
        )
    except CLI_ERRORS as e:
        _fail(e)

    typer.echo(f"Created container {container['name']}")


@app.command("delete")
def delete_cmd(
    name: ContainerNameArgument,
    param: ParamOption = None,
    header: HeaderOption = None,
    storage_url: StorageUrlOption = None,
    auth_token: AuthTokenOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Delete a container.

    The container must be empty unless the server supports a force-delete
    query parameter, which can be passed with --param.
    """
    try:
        client = _service_client(storage_url, auth_token, timeout)
        delete_container(
            client,
            DeleteOpts(
                name=name,
                headers=parse_key_value_pairs(header, "--header"),
                params=parse_key_value_pairs(param, "--param"),
            ),
        )
    except CLI_ERRORS as e:
        _fail(e)

    typer.echo(f"Deleted container {name}")


@app.command("update")
def update_cmd(
    name: ContainerNameArgument,
    meta: MetadataOption = None,
    header: HeaderOption = None,
    storage_url: StorageUrlOption = None,
    auth_token: AuthTokenOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Set or change container metadata.

    Examples:
        swift-tools update photos --meta owner=bob
        swift-tools update photos --header X-Remove-Container-Meta-Owner=x
    """
    try:
        client = _service_client(storage_url, auth_token, timeout)
        update_container(
            client,
            UpdateOpts(
                name=name,
                headers=parse_key_value_pairs(header, "--header"),
                metadata=parse_key_value_pairs(meta, "--meta"),
            ),
        )
    except CLI_ERRORS as e:
        _fail(e)

    typer.echo(f"Updated container {name}")


@app.command("show")
def show_cmd(
    name: ContainerNameArgument,
    header: HeaderOption = None,
    storage_url: StorageUrlOption = None,
    auth_token: AuthTokenOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Show container usage and metadata.
    """
    try:
        client = _service_client(storage_url, auth_token, timeout)
        result = get_container(
            client,
            GetOpts(name=name, headers=parse_key_value_pairs(header, "--header")),
        )
    except CLI_ERRORS as e:
        _fail(e)

    typer.echo(f"Container: {name}")
    if result.object_count is not None:
        typer.echo(f"Objects: {result.object_count:,}")
    if result.bytes_used is not None:
        typer.echo(f"Bytes used: {result.bytes_used:,}")
    metadata = extract_metadata(result)
    if metadata:
        typer.echo("Metadata:")
        for key, value in sorted(metadata.items()):
            typer.echo(f"  {key}: {value}")


if __name__ == "__main__":
    app()
