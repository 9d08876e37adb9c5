import datetime as DT
import logging
from typing import Optional

import click


def init_logs(log_level: int = logging.INFO, force: bool = False):
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=log_level,
        force=force,
    )
    logging.getLogger().setLevel(log_level)


def dt2date(
    ctx: click.Context,
    param: click.Parameter,
    value: Optional[DT.datetime],
) -> Optional[DT.date]:
    if isinstance(value, DT.datetime):
        return value.date()
    return value
