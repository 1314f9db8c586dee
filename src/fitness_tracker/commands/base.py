"""Shared CLI utilities."""

from functools import wraps

import click

from ..db import LocalStorage, SQLiteBackend, StorageError, get_db_path


def storage_command(f):
    """Decorator reporting storage failures as a CLI error instead of a traceback."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except StorageError as e:
            echo_error(f"Storage failure: {e}")
            click.get_current_context().exit(1)

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the local store is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'fitness-tracker init' first."
        )
        ctx.exit(1)


def get_storage() -> LocalStorage:
    """Open the record store backed by the local database file."""
    return LocalStorage(SQLiteBackend(get_db_path()))


def current_user(ctx: click.Context) -> str:
    """Get the owner id selected with --user."""
    return ctx.obj["user_id"]


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)


def format_optional(value, suffix: str = "") -> str:
    """Format an optional number for table display."""
    if value is None:
        return "-"
    return f"{value:g}{suffix}" if isinstance(value, (int, float)) else f"{value}{suffix}"


def find_record(ctx: click.Context, records: list, record_id: str, label: str):
    """Pick one record by full id or unique id prefix, exiting if none matches."""
    matches = [record for record in records if record.id == record_id]
    if not matches:
        matches = [record for record in records if record.id.startswith(record_id)]
    if len(matches) != 1:
        echo_error(f"{label} {record_id} not found")
        ctx.exit(1)
    return matches[0]
