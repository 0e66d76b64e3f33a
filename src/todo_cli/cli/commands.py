# src/todo_cli/cli/commands.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from typing import TypeVar

import click

from .. import __version__
from ..config import BACKENDS, get_settings
from ..ports import TaskRepo
from ..tasks.errors import StorageError, TaskValidationError
from ..tasks.task_models import Task, TaskListing
from .bootstrap import open_store

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXAMPLES = """\b
Examples:
  todo add -t "Meeting" -d "Team standup at 10AM"
  todo complete -i 1
  todo remove -i 2
  todo list
"""


def format_task(task: Task) -> str:
    return (
        f"- ID: {task.id}\n"
        f"- Title: {task.title}\n"
        f"- Description: {task.description}\n"
        f"- Completed: {'true' if task.completed else 'false'}\n"
        "--------"
    )


def _format_section(header: str, tasks: list[Task], empty: str) -> list[str]:
    lines = [header, "-" * len(header)]
    if not tasks:
        lines.append(empty)
    else:
        lines.extend(format_task(t) for t in tasks)
    return lines


def format_listing(listing: TaskListing) -> str:
    lines = _format_section("Pending Todos:", listing.pending, "No pending todos!")
    lines.append("")
    lines.extend(_format_section("Completed Todos:", listing.completed, "No completed todos!"))
    return "\n".join(lines)


def _run(ctx: click.Context, op: Callable[[TaskRepo], T]) -> T:
    """Open the configured store and run one operation against it."""
    try:
        store = open_store(ctx.obj)
        return op(store)
    except StorageError as exc:
        logger.debug("Storage failure", exc_info=True)
        raise click.ClickException(str(exc)) from exc
    except TaskValidationError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc


def _require(value: str, param_hint: str, field: str) -> str:
    if not value.strip():
        raise click.BadParameter(f"{field} is required", param_hint=param_hint)
    return value


@click.group(
    help="Todo is a CLI application for managing your tasks.\n\n"
    "It provides simple commands to add, list, complete, and remove todos. "
    "Data is stored locally in a SQLite database or a JSON file.",
    epilog=EXAMPLES,
)
@click.option(
    "--backend",
    type=click.Choice(BACKENDS, case_sensitive=False),
    default=None,
    help="Storage backend for this run (overrides TODO_BACKEND).",
)
@click.version_option(__version__, prog_name="todo")
@click.pass_context
def cli(ctx: click.Context, backend: str | None) -> None:
    settings = ctx.obj if ctx.obj is not None else get_settings()
    if backend:
        settings = dataclasses.replace(settings, backend=backend.lower())
    ctx.obj = settings


@cli.command("add", help="Add a new todo.")
@click.option("-t", "--title", required=True, help="Title of the todo.")
@click.option("-d", "--description", required=True, help="Description of the todo.")
@click.pass_context
def add_cmd(ctx: click.Context, title: str, description: str) -> None:
    _require(title, "'-t' / '--title'", "title")
    _require(description, "'-d' / '--description'", "description")

    task = _run(ctx, lambda store: store.add(title, description))
    click.echo(f"Todo added successfully! (ID {task.id})")


@cli.command("list", help="List all todos.")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    listing = _run(ctx, lambda store: store.list())
    click.echo(format_listing(listing))


@cli.command("complete", help="Mark a todo as completed.")
@click.option("-i", "--id", "task_id", type=int, required=True, help="ID of the todo to complete.")
@click.pass_context
def complete_cmd(ctx: click.Context, task_id: int) -> None:
    if _run(ctx, lambda store: store.complete(task_id)):
        click.echo(f"Todo {task_id} marked as completed!")
    else:
        click.echo(f"No todo found with ID {task_id}")


@cli.command("remove", help="Remove a todo.")
@click.option("-i", "--id", "task_id", type=int, required=True, help="ID of the todo to remove.")
@click.pass_context
def remove_cmd(ctx: click.Context, task_id: int) -> None:
    if _run(ctx, lambda store: store.remove(task_id)):
        click.echo(f"Todo {task_id} removed successfully!")
    else:
        click.echo(f"No todo found with ID {task_id}")
