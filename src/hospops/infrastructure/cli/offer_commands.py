"""CLI commands for the offer catalog."""

from __future__ import annotations

import click

from hospops.application.offers import OFFER_CATALOG


@click.command("list")
def offer_list() -> None:
    """List catalog offers (apply one with 'order quote --offer')."""
    click.echo(f"{'Offer':<24} {'Min Qty':>8} {'Rate':>6}")
    click.echo("-" * 40)
    for rule in OFFER_CATALOG:
        click.echo(f"{rule.name:<24} {rule.minimum_quantity:>8} {rule.discount_rate:>5}%")
