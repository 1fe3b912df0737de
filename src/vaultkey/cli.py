"""Command-line interface for vaultkey."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from vaultkey.config import ClientConfig, config_from_env, find_config, load_config
from vaultkey.output.rich import console, print_error, print_success, print_warning
from vaultkey.vault import VaultError, get_vault_client

app = typer.Typer(
    name="vaultkey",
    help="Read and write versioned encryption keys in HashiCorp Vault.",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to vaultkey.toml (default: search upwards)"),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log HTTP activity to stderr")
]


def _load(config_path: Path | None, verbose: bool) -> ClientConfig:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        path = config_path or find_config()
        return load_config(path) if path else config_from_env()
    except VaultError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def read(
    path: Annotated[str, typer.Argument(help="Secret path, e.g. secret/data/db-key")],
    version: Annotated[
        int, typer.Option("--version", "-V", min=0, help="Version to read (0 = latest)")
    ] = 0,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Print only the secret value")
    ] = False,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Read a secret, optionally pinned to a version."""
    client_config = _load(config, verbose)

    try:
        with get_vault_client("hashicorp", client_config) as client:
            secret = client.get_secret(path, version)
    except VaultError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not secret.found:
        print_warning(f"Secret '{path}' not found")
        return

    if quiet:
        console.print(secret.value, markup=False, highlight=False, soft_wrap=True)
        return

    console.print(
        Panel(
            f"[bold]Path:[/bold] {escape(path)}\n[bold]Version:[/bold] {secret.version}",
            title="vaultkey read",
        )
    )
    console.print(secret.value, markup=False, highlight=False, soft_wrap=True)


@app.command()
def write(
    path: Annotated[str, typer.Argument(help="Secret path, e.g. secret/data/db-key")],
    value: Annotated[
        Optional[str], typer.Argument(help="Secret value (or use --value-file)")
    ] = None,
    value_file: Annotated[
        Optional[Path],
        typer.Option("--value-file", "-f", help="Read the secret value from this file"),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write a new version of a secret."""
    if (value is None) == (value_file is None):
        print_error("Provide exactly one of VALUE or --value-file")
        raise typer.Exit(code=1)

    if value_file is not None:
        try:
            value = value_file.read_text(encoding="utf-8").rstrip("\n")
        except OSError as e:
            print_error(f"Cannot read {value_file}: {e}")
            raise typer.Exit(code=1) from None

    client_config = _load(config, verbose)

    try:
        with get_vault_client("hashicorp", client_config) as client:
            secret = client.set_secret(path, value)
    except VaultError as e:
        print_error(f"Failed to write secret: {e}")
        raise typer.Exit(code=1) from None

    print_success(f"Wrote secret '{path}'")
    console.print(f"  Version: {secret.version}")


@app.command("version")
def show_version() -> None:
    """Show vaultkey version."""
    from vaultkey import __version__

    console.print(f"vaultkey [bold green]{__version__}[/bold green]")


if __name__ == "__main__":
    app()
