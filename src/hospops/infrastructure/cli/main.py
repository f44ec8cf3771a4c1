import logging

import click

from hospops.infrastructure.bootstrap import settings
from hospops.infrastructure.cli.offer_commands import offer_list
from hospops.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_pay,
    order_quote,
    order_receive,
    order_show,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """HospOps — hospital order pricing and receiving"""
    try:
        level = "DEBUG" if verbose else settings().log_level
    except RuntimeError as exc:
        raise click.ClickException(str(exc))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage purchase orders, sales orders and stock transfers."""


@cli.group()
def offer() -> None:
    """Browse promotional offers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_quote)
order.add_command(order_receive)
order.add_command(order_show)
offer.add_command(offer_list)
