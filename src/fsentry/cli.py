# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/cli.py

"""Command line interface for fsentry."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import local
from .entry import Entry
from .permissions import Capability, PexClass, UnixPex

app = typer.Typer(help="Inspect file-system entries as backends report them")
console = Console()


@app.command()
def ls(
    path: Path = typer.Argument(..., help="Directory to list"),
    output_format: str = typer.Option("table", "--format", "-f",
                                      help="Output format: json, summary, table"),
    show_all: bool = typer.Option(False, "--all", "-a",
                                  help="Include hidden entries"),
    follow_links: bool = typer.Option(False, "--follow", "-L",
                                      help="Resolve symlinks to their targets"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output")
) -> None:
    """List a local directory as entries."""
    try:
        path = path.absolute()
        if debug:
            console.print(f"[blue]Listing:[/blue] {path}")
            console.print(f"  Follow links: {follow_links}")

        entries = local.list_dir(path, follow_links=follow_links)
        if not show_all:
            hidden = [e for e in entries if e.is_hidden()]
            entries = [e for e in entries if not e.is_hidden()]
            if debug:
                console.print(f"  Skipped {len(hidden)} hidden entries")

        _render(entries, output_format, title=str(path))

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def stat(
    path: Path = typer.Argument(..., help="File or directory to inspect"),
    output_format: str = typer.Option("json", "--format", "-f",
                                      help="Output format: json, summary, table"),
    follow_links: bool = typer.Option(False, "--follow", "-L",
                                      help="Resolve symlinks to their targets"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output")
) -> None:
    """Show the entry for a single path."""
    try:
        path = path.absolute()
        if debug:
            console.print(f"[blue]Stat:[/blue] {path}")

        entry = local.stat(path, follow_links=follow_links)
        if output_format == "json":
            typer.echo(json.dumps(_entry_to_dict(entry), indent=2))
        else:
            _render([entry], output_format, title=str(path))

    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def mode(
    value: str = typer.Argument(..., help="Octal mode (755) or symbolic (rwxr-xr-x)")
) -> None:
    """Convert a permission mode between octal and symbolic form."""
    try:
        pex = _parse_mode(value)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console.print(f"Octal: {pex.to_mode():03o}")
    console.print(f"Symbolic: {pex}")

    table = Table(title="Permissions")
    table.add_column("Class", style="cyan")
    for capability in Capability:
        table.add_column(capability.value.title(), style="green")
    for pex_class in PexClass:
        table.add_row(
            pex_class.value,
            *("yes" if pex.has(pex_class, c) else "no" for c in Capability)
        )
    console.print(table)


def _parse_mode(value: str) -> UnixPex:
    """Accept '755', '0o755', '0755' or a symbolic string."""
    text = value.strip()
    if text.lower().startswith("0o"):
        text = text[2:]
    if text.isdigit():
        try:
            mode_value = int(text, 8)
        except ValueError:
            raise ValueError(f"Invalid octal mode: {value}") from None
        if mode_value > 0o7777:
            raise ValueError(f"Mode out of range: {value}")
        return UnixPex.from_mode(mode_value)
    return UnixPex.from_symbolic(text)


def _entry_to_dict(entry: Entry) -> dict:
    """Convert an entry to a JSON-serializable dict."""
    meta = entry.metadata
    return {
        'name': entry.name,
        'path': str(entry.path),
        'kind': entry.kind,
        'extension': entry.extension,
        'hidden': entry.is_hidden(),
        'metadata': {
            'size': meta.size,
            'file_type': meta.file_type.value,
            'created': meta.created.isoformat() if meta.created else None,
            'modified': meta.modified.isoformat() if meta.modified else None,
            'accessed': meta.accessed.isoformat() if meta.accessed else None,
            'uid': meta.uid,
            'gid': meta.gid,
            'mode': f"{meta.mode.to_mode():03o}" if meta.mode else None,
            'symlink': str(meta.symlink) if meta.symlink else None,
        }
    }


def _render(entries: list[Entry], output_format: str, title: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps([_entry_to_dict(e) for e in entries], indent=2))
    elif output_format == "summary":
        _print_summary(entries)
    elif output_format == "table":
        _print_table(entries, title)
    else:
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(1)


def _print_summary(entries: list[Entry]) -> None:
    """Print counts by kind and extension."""
    from collections import Counter

    directories = sum(1 for e in entries if e.is_dir())
    files = len(entries) - directories
    by_extension = Counter(e.extension or "(none)" for e in entries if e.is_file())

    console.print(f"\n[bold]Summary of {len(entries)} entries:[/bold]")
    console.print(f"  Directories: {directories}")
    console.print(f"  Files: {files}")
    console.print(f"  Symlinks: {sum(1 for e in entries if e.is_symlink())}")
    console.print(f"  Hidden: {sum(1 for e in entries if e.is_hidden())}")
    console.print(f"  Total file size: {sum(e.metadata.size for e in entries if e.is_file()):,}")

    if by_extension:
        console.print(f"\n[bold]By extension:[/bold]")
        for ext, count in by_extension.most_common():
            console.print(f"  {ext}: {count}")


def _print_table(entries: list[Entry], title: str) -> None:
    """Print entries in ls -l style table format."""
    table = Table(title=title)
    table.add_column("Mode", style="cyan")
    table.add_column("Size", style="white", justify="right")
    table.add_column("Modified", style="yellow")
    table.add_column("Name", style="green")

    for entry in entries:
        meta = entry.metadata
        kind = "l" if entry.is_symlink() else ("d" if entry.is_dir() else "-")
        perms = str(meta.mode) if meta.mode else "?????????"
        modified = meta.modified.strftime("%Y-%m-%d %H:%M") if meta.modified else ""
        name = escape(entry.name) + ("/" if entry.is_dir() else "")
        if meta.symlink:
            name = f"{name} → {escape(str(meta.symlink))}"
        table.add_row(f"{kind}{perms}", f"{meta.size:,}", modified, name)

    console.print(table)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
