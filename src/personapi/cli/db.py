"""``personapi db``: create, inspect and migrate the person database."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from rich.console import Console
from rich.table import Table

from personapi.db import operations
from personapi.db.connect import resolve_db_uri
from personapi.logging import get_logger

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "db" / "migrations"


def register_subcommands(subparsers):
    """Attach database subcommands to an ``argparse`` parser.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="personapi db")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> parser.parse_args(["upgrade", "--database", "people.db"])
    Namespace(subcommand='upgrade', revision='head', database='people.db')
    """

    init_parser = subparsers.add_parser("init", help="create the person table")
    init_parser.add_argument("--file", required=False)

    subparsers.add_parser("status", help="show the SQLite version")
    subparsers.add_parser("show", help="show the person table columns")

    for action, default in (("upgrade", "head"), ("downgrade", "-1")):
        migrate_parser = subparsers.add_parser(action, help=f"{action} the schema with alembic")
        migrate_parser.add_argument(
            "revision", nargs="?", default=default, help=f"target revision (default: {default})"
        )
        migrate_parser.add_argument("--database", help="database file or sqlite URI")


def dispatch(args):
    """Run the database operation named by ``args.subcommand``."""

    if args.subcommand == "status":
        operations.check_status()
    elif args.subcommand == "show":
        render_person_schema(operations.describe_person_table())
    elif args.subcommand == "init":
        operations.initialize(file_path=args.file)
    elif args.subcommand in ("upgrade", "downgrade"):
        migrate(args.subcommand, args.revision, database=args.database)
    else:
        message = f"No handler for db subcommand: {args.subcommand}"
        get_logger(__file__).error(message)
        raise ValueError(message)


def render_person_schema(columns, console: Console | None = None) -> None:
    table = Table(title="person", show_lines=False)
    table.add_column("Column", style="magenta")
    table.add_column("Type", style="green")
    table.add_column("Nullable", justify="center", style="yellow")
    table.add_column("Key", justify="center", style="bold cyan")

    for column in columns:
        table.add_row(
            column["name"],
            column["type"],
            "yes" if column["nullable"] else "no",
            "PK" if column["primary_key"] else "",
        )

    (console or Console()).print(table)


def alembic_config(database: str | None = None) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", resolve_db_uri(database))
    return config


def migrate(action: str, revision: str, database: str | None = None) -> None:
    """Run ``alembic upgrade`` or ``alembic downgrade`` against ``database``."""

    config = alembic_config(database)
    get_logger(__file__).info(
        "alembic %s %s on %s", action, revision, config.get_main_option("sqlalchemy.url")
    )
    getattr(command, action)(config, revision)
