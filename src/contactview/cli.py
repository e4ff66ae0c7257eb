"""Typer-based CLI entry point."""

from __future__ import annotations

from dataclasses import replace
from functools import wraps
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .application.interfaces import NotificationSeverity
from .application.services.notifiers import RecordingNotifier
from .config import ViewConfig
from .di import Container, bootstrap
from .errors import (
    ContactViewError,
    InvariantViolation,
    RecordNotFoundError,
    SettingsError,
    UnknownFieldError,
)
from .gui.factories.viewmodel_factory import ViewModelFactory
from .gui.viewmodels.contact_list_viewmodel import ContactListViewModel
from .infrastructure.gateways.json_gateway import JsonFileContactGateway
from .settings.manager import SettingsManager
from .utils.logging import configure_logging

app = typer.Typer(help="Browse and edit contacts stored in a JSON file")
console = Console()
err_console = Console(stderr=True)

_STYLES = {
    NotificationSeverity.SUCCESS: "green",
    NotificationSeverity.ERROR: "red",
    NotificationSeverity.INFO: "cyan",
}


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (SettingsError, UnknownFieldError, RecordNotFoundError, InvariantViolation) as exc:
            err_console.print(f"Error: {exc}", style="red", markup=False)
            raise typer.Exit(1) from exc
        except ContactViewError as exc:
            err_console.print(f"Unexpected error: {exc}", style="red", markup=False)
            raise typer.Exit(1) from exc

    return wrapper


def _load_config(settings: Optional[Path], page_size: Optional[int]) -> ViewConfig:
    config = ViewConfig()
    if settings is not None:
        manager = SettingsManager(path=settings)
        manager.load()
        config = manager.view_config()
    if page_size is not None:
        if page_size <= 0:
            raise InvariantViolation("--page-size must be positive")
        config = replace(config, page_size=page_size)
    return config


def _build(
    path: Path,
    settings: Optional[Path],
    page_size: Optional[int],
) -> tuple[ContactListViewModel, RecordingNotifier]:
    notifier = RecordingNotifier()
    container = bootstrap(
        Container(),
        contact_gateway=JsonFileContactGateway(path),
        view_config=_load_config(settings, page_size),
        notifier=notifier,
    )
    return ViewModelFactory(container).create_contact_list_vm(), notifier


def _flush(notifier: RecordingNotifier) -> None:
    for note in notifier.notifications:
        target = err_console if note.severity is NotificationSeverity.ERROR else console
        target.print(f"{note.title}: {note.message}", style=_STYLES[note.severity], markup=False)
    notifier.clear()


def _render(vm: ContactListViewModel) -> None:
    view = vm.view
    table = Table(
        title=f"Contacts, page {view.page} of {view.total_pages}",
        caption=f"{view.total_count} matching",
    )
    table.add_column("Id", style="dim")
    for column in vm.config.columns:
        marker = ""
        if column == vm.sort_field.value:
            marker = " ▲" if vm.sort_direction.value.value == "asc" else " ▼"
        table.add_column(f"{column}{marker}")
    for record in view.items:
        values = vm.row_values(record)
        table.add_row(record.id, *("" if values.get(c) is None else str(values.get(c)) for c in vm.config.columns))
    console.print(table)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    configure_logging(verbose)


@app.command("list")
@_handle_errors
def list_contacts(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON contact file"),
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive search key"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Field to sort by"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
    page: int = typer.Option(1, "--page", "-p", help="Page to show (clamped)"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Rows per page"),
    settings: Optional[Path] = typer.Option(None, "--settings", help="Settings JSON file"),
) -> None:
    """Show one page of the filtered, sorted contact list."""

    vm, notifier = _build(path, settings, page_size)
    if not vm.load():
        _flush(notifier)
        raise typer.Exit(1)
    vm.search(search)
    if sort is not None:
        vm.sort(sort, "desc" if desc else "asc")
    elif desc:
        vm.sort(vm.sort_field.value, "desc")
    vm.go_to_page(page)
    _render(vm)
    _flush(notifier)


@app.command()
@_handle_errors
def edit(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON contact file"),
    record_id: str = typer.Argument(..., help="Id of the contact to edit"),
    assignments: List[str] = typer.Argument(..., help="FIELD=VALUE pairs"),
    settings: Optional[Path] = typer.Option(None, "--settings", help="Settings JSON file"),
) -> None:
    """Record FIELD=VALUE drafts for one contact and commit them as a batch."""

    vm, notifier = _build(path, settings, None)
    if not vm.load():
        _flush(notifier)
        raise typer.Exit(1)
    vm.store.require(record_id)
    for assignment in assignments:
        field_name, sep, value = assignment.partition("=")
        if not sep or not field_name:
            raise typer.BadParameter(f"expected FIELD=VALUE, got {assignment!r}")
        vm.edit(record_id, field_name, value)
    committed = vm.save()
    _flush(notifier)
    if not committed:
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    app()
