"""Command group: date ranges and month boundaries."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from bfn.commands._base import BfnGroup
from bfn.services.calendar import CalendarService

if TYPE_CHECKING:
    from bfn.commands._context import AppContext

_ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])

_DATE_EXAMPLES = """\
  bfn date range 2023-12-12 2023-12-15
  bfn -q date range 2024-02-27 2024-03-01
  bfn date month 2024-02-07"""


@click.group("date", cls=BfnGroup, examples=_DATE_EXAMPLES)
def date_group() -> None:
    """Inclusive date ranges and month boundaries."""


@date_group.command("range", examples="  bfn date range 2023-12-12 2023-12-15")
@click.argument("start", type=_ISO_DATE)
@click.argument("end", type=_ISO_DATE)
@click.pass_obj
def date_range(app: AppContext, start: datetime, end: datetime) -> None:
    """Every date from START to END, both inclusive."""
    app.emit(CalendarService(app.settings).range(start.date(), end.date()))


@date_group.command(examples="  bfn date month 2024-02-07")
@click.argument("day", type=_ISO_DATE)
@click.pass_obj
def month(app: AppContext, day: datetime) -> None:
    """First and last day of the month containing DAY."""
    app.emit(CalendarService(app.settings).month_bounds(day.date()))
