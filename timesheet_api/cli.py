import datetime
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .app import (
    add_entry,
    config as app_config,
    db,
    edit_entry,
    init_db,
    print_entries,
    remove_entry,
)
from .constants import DATE_FORMATS, MAX_ENTRY_ID, MAX_HOURS, MIN_HOURS, ROW_HEADER
from .exceptions import NotFound, StorageFailure, ValidationError
from .models import TimesheetEntry
from .util import dt2date, init_logs
from .version import get_version


def init_app(
    config_file: Optional[Path] = None,
    db_file: Optional[Path] = None,
    log_level: int = logging.WARNING,
) -> None:
    """Updates config from cli options"""
    init_logs(log_level)
    if config_file:
        app_config.from_file(Path(config_file))
    if db_file and Path(db_file) != app_config.db_file:
        app_config.update(db_file=db_file, db_url=None)
    app_config.debug = log_level == logging.DEBUG
    db.connect(app_config.database_url, app_config.echo_sql)


###############
# timesheet
###############


@click.group()
@click.option(
    "-d",
    "--db-file",
    type=click.Path(dir_okay=False, writable=True),
    envvar="TIMESHEET_DB_FILE",
    help="SQLite file to store entries in",
)
@click.option(
    "-c",
    "--config-file",
    type=click.Path(dir_okay=False),
    envvar="TIMESHEET_CONFIG",
    help="File with custom config settings",
)
@click.option("--verbose", "log_level", flag_value=logging.INFO, help="Set logging to info")
@click.option("--debug", "log_level", flag_value=logging.DEBUG, help="Set logging to debug")
@click.version_option(get_version(), prog_name="timesheet")
def run_cli(
    db_file: Optional[Path],
    config_file: Optional[Path],
    log_level: Optional[int] = None,
) -> None:
    init_app(config_file, db_file, log_level or logging.WARNING)


###############
## timesheet serve
###############


@click.command(help="serve the timesheet REST api")
@click.option("--host", help="Interface to bind to (default from config)")
@click.option("--port", type=int, help="Port to listen on (default from config)")
def serve(host: Optional[str], port: Optional[int]) -> None:
    import uvicorn

    from .api import create_app

    if host:
        app_config.host = host
    if port:
        app_config.port = port
    api = create_app(app_config, db)
    uvicorn.run(
        api,
        host=app_config.host,
        port=app_config.port,
        log_level="debug" if app_config.debug else "info",
    )


###############
## timesheet initdb
###############


@click.command(help="create the timesheet tables if they don't exist")
def initdb() -> None:
    init_db()
    print(f"Database ready: {db.engine_url}")


###############
## timesheet print
###############


@click.command(
    "print",
    short_help="print timesheet entries",
    help="prints out all timesheet entries",
)
def print_logs() -> None:
    try:
        count = print_entries()
    except StorageFailure as e:
        logging.error(e)
        sys.exit(1)
    logging.info(f"Printed {count} entries")


###############
## timesheet add / edit
###############


def entry_options(func):
    func = click.option("-n", "--notes", help="Free text notes")(func)
    func = click.option(
        "--hours",
        type=int,
        required=True,
        help=f"Hours worked, {MIN_HOURS}-{MAX_HOURS}",
    )(func)
    return func


@click.command(help="add a new timesheet entry")
@click.argument("employee")
@click.argument("project")
@click.argument(
    "work_date",
    metavar="[DATE]",
    type=click.DateTime(DATE_FORMATS),
    callback=dt2date,
    default=str(datetime.date.today()),
)
@entry_options
def add(
    employee: str,
    project: str,
    work_date: datetime.date,
    hours: int,
    notes: Optional[str],
) -> None:
    candidate = TimesheetEntry(
        employee_name=employee, project=project, work_date=work_date, hours=hours, notes=notes
    )
    try:
        new_entry = add_entry(candidate)
    except (ValidationError, StorageFailure) as e:
        logging.error(e)
        sys.exit(1)
    print(f"Created timesheet entry:\n{ROW_HEADER}")
    print(new_entry)


@click.command(help="replace every field of an existing timesheet entry")
@click.argument("entry_id", metavar="ID", type=click.IntRange(1, MAX_ENTRY_ID))
@click.argument("employee")
@click.argument("project")
@click.argument("work_date", metavar="DATE", type=click.DateTime(DATE_FORMATS), callback=dt2date)
@entry_options
def edit(
    entry_id: int,
    employee: str,
    project: str,
    work_date: datetime.date,
    hours: int,
    notes: Optional[str],
) -> None:
    candidate = TimesheetEntry(
        employee_name=employee, project=project, work_date=work_date, hours=hours, notes=notes
    )
    try:
        updated = edit_entry(entry_id, candidate)
    except (NotFound, ValidationError, StorageFailure) as e:
        logging.error(e)
        sys.exit(1)
    print(f"Updated timesheet entry:\n{ROW_HEADER}")
    print(updated)


###############
## timesheet rm
###############


@click.command(help="delete a timesheet entry")
@click.argument("entry_id", metavar="ID", type=click.IntRange(1, MAX_ENTRY_ID))
def rm(entry_id: int) -> None:
    try:
        remove_entry(entry_id)
    except (NotFound, StorageFailure) as e:
        logging.error(e)
        sys.exit(1)
    print(f"Deleted timesheet entry {entry_id}")


###############

run_cli.add_command(serve)
run_cli.add_command(initdb)
run_cli.add_command(print_logs)
run_cli.add_command(add)
run_cli.add_command(edit)
run_cli.add_command(rm)
