"""Shared CLI parameter definitions.

Options used by more than one command are declared once here as Annotated
aliases so every command exposes the same names, defaults and help text.

Usage:
    @app.command()
    def my_command(
        storage_url: StorageUrlOption = None,
        metadata: MetadataOption = None,
    ):
        pass
"""

from typing import Annotated, Dict, List, Optional

import typer

from .core.exceptions import ValidationError

ContainerNameArgument = Annotated[str, typer.Argument(help="Container name")]

StorageUrlOption = Annotated[
    Optional[str],
    typer.Option(
        "--storage-url",
        help="Storage account URL (default: SWIFT_TOOLS_STORAGE_URL)",
    ),
]

AuthTokenOption = Annotated[
    Optional[str],
    typer.Option(
        "--auth-token",
        help="Auth token sent as X-Auth-Token (default: SWIFT_TOOLS_AUTH_TOKEN)",
    ),
]

TimeoutOption = Annotated[
    Optional[float],
    typer.Option("--timeout", help="Request timeout in seconds"),
]

MetadataOption = Annotated[
    Optional[List[str]],
    typer.Option("--meta", help="Container metadata as KEY=VALUE (repeatable)"),
]

HeaderOption = Annotated[
    Optional[List[str]],
    typer.Option("--header", help="Extra request header as NAME=VALUE (repeatable)"),
]

ParamOption = Annotated[
    Optional[List[str]],
    typer.Option("--param", help="Query parameter as KEY=VALUE (repeatable)"),
]


def parse_key_value_pairs(values: Optional[List[str]], option: str) -> Dict[str, str]:
    """Turn repeated KEY=VALUE option values into a dict.

    Raises:
        ValidationError: If a value has no '=' or an empty key
    """
    pairs: Dict[str, str] = {}
    for value in values or []:
        key, sep, item = value.partition("=")
        if not sep or not key:
            raise ValidationError(f"{option} expects KEY=VALUE, got: {value}")
        pairs[key] = item
    return pairs
