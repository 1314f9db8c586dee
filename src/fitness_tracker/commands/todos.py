"""To-do list commands."""

from uuid import uuid4

import click

from ..models.todo import Todo
from ..services.summaries import todo_completion
from .base import (
    current_user,
    echo_info,
    echo_success,
    ensure_initialized,
    find_record,
    format_table,
    get_storage,
    storage_command,
)


@click.group()
@click.pass_context
def todos(ctx):
    """Keep a simple fitness to-do list."""
    ensure_initialized(ctx)


@todos.command()
@click.argument("title")
@click.option("--due", type=click.DateTime(formats=["%Y-%m-%d"]), help="Due date (YYYY-MM-DD)")
@click.pass_context
@storage_command
def add(ctx, title: str, due):
    """Add a to-do."""
    todo = Todo(
        id=str(uuid4()),
        user_id=current_user(ctx),
        title=title,
        due_date=due.strftime("%Y-%m-%d") if due else None,
    )
    get_storage().save_todo(todo)
    echo_success(f"Added '{title}'")


@todos.command(name="list")
@click.pass_context
@storage_command
def list_todos(ctx):
    """List to-dos with completion status."""
    items = get_storage().get_todos(current_user(ctx))

    if not items:
        echo_info("Nothing to do. Add a to-do with 'fitness-tracker todos add'")
        return

    headers = ["ID", "Done", "Title", "Due"]
    rows = [
        [todo.id[:8], "x" if todo.completed else " ", todo.title, todo.due_date or "-"]
        for todo in items
    ]

    completed, total = todo_completion(items)
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"{completed}/{total} completed")


@todos.command()
@click.argument("todo_id")
@click.option("--undo", is_flag=True, help="Mark as not completed")
@click.pass_context
@storage_command
def done(ctx, todo_id: str, undo: bool):
    """Mark a to-do as completed."""
    storage = get_storage()
    todo = find_record(ctx, storage.get_todos(current_user(ctx)), todo_id, "To-do")
    todo.completed = not undo
    storage.save_todo(todo)
    echo_success(f"'{todo.title}' marked {'open' if undo else 'done'}")


@todos.command()
@click.argument("todo_id")
@click.pass_context
@storage_command
def delete(ctx, todo_id: str):
    """Delete a to-do."""
    storage = get_storage()
    todo = find_record(ctx, storage.get_todos(current_user(ctx)), todo_id, "To-do")
    storage.delete_todo(todo.id)
    echo_success(f"Deleted '{todo.title}'")
