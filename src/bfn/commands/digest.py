"""Command group: MD5 fingerprints and random tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bfn.commands._base import BfnGroup
from bfn.services.digest import DigestService

if TYPE_CHECKING:
    from bfn.commands._context import AppContext

_DIGEST_EXAMPLES = """\
  bfn digest md5 "Hello, world!"
  bfn digest md5 "Hello, world!" --uuid
  bfn digest verify "Hello, world!" bNNVbesNpUvKBgtMOUeYOQ==
  bfn digest random --size 24"""


@click.group(cls=BfnGroup, examples=_DIGEST_EXAMPLES)
def digest() -> None:
    """Fingerprint values and generate random tokens."""


@digest.command(
    examples="""\
  bfn digest md5 "Hello, world!"
  bfn -q digest md5 "Hello, world!" --uuid"""
)
@click.argument("value")
@click.option("--uuid", "as_uuid", is_flag=True, help="Render the digest as a UUID.")
@click.pass_obj
def md5(app: AppContext, value: str, as_uuid: bool) -> None:
    """MD5 fingerprint of VALUE (base64 by default)."""
    app.emit(DigestService(app.settings).md5(value, as_uuid=as_uuid))


@digest.command(
    examples="""\
  bfn digest verify "Hello, world!" bNNVbesNpUvKBgtMOUeYOQ==
  bfn digest verify "Hello, world!" 6cd3556d-eb0d-a54b-ca06-0b4c39479839"""
)
@click.argument("value")
@click.argument("expected")
@click.pass_obj
def verify(app: AppContext, value: str, expected: str) -> None:
    """Check VALUE against an EXPECTED base64 or UUID fingerprint."""
    app.emit(DigestService(app.settings).verify(value, expected))


@digest.command(
    examples="""\
  bfn digest random
  bfn -q digest random --size 16"""
)
@click.option("--size", default=None, type=int, help="Random byte count (default from config).")
@click.pass_obj
def random(app: AppContext, size: int | None) -> None:
    """Base64 token made of random bytes."""
    app.emit(DigestService(app.settings).random(size))
