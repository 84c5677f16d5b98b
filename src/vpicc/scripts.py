# filename : scripts.py
# created  : 10/17/2026


import logging

import click

from vpicc.core.smartcard.logging import PROTOCOL, TRACE
from vpicc.core.vpcd import DEFAULT_HOST, DEFAULT_PORT

lg = logging.getLogger(__name__)


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show raw frames).")
@click.option(
    "--host",
    default=DEFAULT_HOST,
    show_default=True,
    envvar="VPICC_HOST",
    help="vpcd host.",
)
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=DEFAULT_PORT,
    show_default=True,
    envvar="VPICC_PORT",
    help="vpcd port.",
)
@click.option(
    "-c",
    "--card",
    type=click.Choice(["dummy", "relay"]),
    default="dummy",
    show_default=True,
    help="Virtual card implementation.",
)
@click.option(
    "-r",
    "--reader",
    default=None,
    help="PC/SC reader name (or part of it) for the relay card.",
)
@click.option(
    "-t",
    "--timeout",
    type=float,
    default=None,
    help="Socket timeout in seconds (default: block forever).",
)
@click.pass_context
def vpicc(ctx, verbose, host, port, card, reader, timeout):

    logging.basicConfig(
        level=TRACE if verbose else PROTOCOL,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    if reader is not None and card != "relay":
        raise click.BadParameter("only the relay card uses a reader", param_hint="'--reader'")

    from vpicc.app.main import main
    if not main(card=card, host=host, port=port, reader=reader, timeout=timeout):
        ctx.exit(1)
