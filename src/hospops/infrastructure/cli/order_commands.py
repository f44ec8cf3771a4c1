"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from hospops.application.create_order import CreateOrderHandler
from hospops.application.delete_order import DeleteOrderHandler
from hospops.application.dto import OrderDTO, OrderItemSpec
from hospops.application.list_orders import ListOrdersHandler
from hospops.application.quote_order import QuoteOrderHandler
from hospops.application.receive_order import RecordReceiptHandler
from hospops.application.record_payment import RecordPaymentHandler
from hospops.application.show_order import ShowOrderHandler
from hospops.domain.exceptions import DomainException
from hospops.domain.model.order import OrderKind, ReceiptCount
from hospops.infrastructure.bootstrap import order_repository, settings

_KIND_CHOICE = click.Choice([k.value.lower() for k in OrderKind], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'SKU:Name:Qty@Price[%Disc],...' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":", 2)
        if len(parts) != 3 or "@" not in parts[2]:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'SKU:Name:Qty@Price[%Discount]'."
            )
        sku, name, rest = parts
        qty_str, price_part = rest.split("@", 1)
        price, _, discount = price_part.partition("%")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for '{sku}'.")
        specs.append(
            OrderItemSpec(
                sku=sku.strip(),
                name=name.strip(),
                quantity=qty,
                unit_price=price.strip(),
                discount_percent=discount.strip() or "0",
            )
        )
    return specs


def _parse_counts(raw: str) -> dict[str, ReceiptCount]:
    """Parse 'SKU:received/damaged/missing,...'; blank slots keep earlier counts."""
    result: dict[str, ReceiptCount] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        sku, sep, counts = entry.rpartition(":")
        slots = counts.split("/")
        if not sep or not sku.strip() or len(slots) != 3:
            raise click.BadParameter(
                f"Invalid count format '{entry}'. Expected 'SKU:received/damaged/missing'."
            )
        values: list[int | None] = []
        for slot in slots:
            slot = slot.strip()
            if slot in ("", "-"):
                values.append(None)
                continue
            try:
                values.append(int(slot))
            except ValueError:
                raise click.BadParameter(f"Invalid count '{slot}' for '{sku}'.")
        received, damaged, missing = values
        result[sku.strip()] = ReceiptCount(received=received, damaged=damaged, missing=missing)
    return result


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"{dto.reference}  #{dto.id}  {dto.kind}  (status={dto.status})")
    click.echo(f"Counterparty: {dto.counterparty}")
    click.echo(f"Created:      {dto.created_at}")
    click.echo(f"Paid:         {dto.paid_amount}")
    click.echo()
    click.echo(
        f"  {'SKU':<12} {'Item':<22} {'Qty':>5} {'Price':>12} {'Disc':>6} {'Subtotal':>14}"
        f" {'Recv':>5} {'Dmg':>4} {'Miss':>4}  Status"
    )
    click.echo(f"  {'-'*102}")
    for item in dto.items:
        click.echo(
            f"  {item.sku:<12} {item.name:<22} {item.quantity:>5} {item.unit_price:>12} "
            f"{item.discount_percent:>6} {item.line_subtotal:>14} "
            f"{item.received:>5} {item.damaged:>4} {item.missing:>4}  {item.status}"
        )


@click.command("create")
@click.option("--kind", required=True, type=_KIND_CHOICE, help="purchase, sales or transfer.")
@click.option("--counterparty", required=True, help="Vendor, customer or destination.")
@click.option("--items", required=True, help="Items as 'SKU:Name:Qty@Price[%Discount],...'.")
@click.option("--reference", default="", help="External reference, e.g. PO-2024-001.")
def order_create(kind: str, counterparty: str, items: str, reference: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)
    handler = CreateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(
            kind=OrderKind(kind.upper()),
            counterparty=counterparty,
            item_specs=specs,
            reference=reference,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("list")
@click.option("--kind", default=None, type=_KIND_CHOICE, help="Only show this kind.")
def order_list(kind: str | None) -> None:
    """List orders with their totals."""
    handler = ListOrdersHandler(
        order_repo=order_repository(), profiles=settings().profiles
    )
    try:
        rows = handler.handle(OrderKind(kind.upper()) if kind else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'ID':>4} {'Reference':<14} {'Kind':<9} {'Counterparty':<22} "
        f"{'Lines':>5} {'Total':>16}  Status"
    )
    click.echo("-" * 96)
    for row in rows:
        click.echo(
            f"{row.id:>4} {row.reference:<14} {row.kind:<9} {row.counterparty:<22} "
            f"{row.line_count:>5} {row.total:>16}  {row.status}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("quote")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to price.")
@click.option("--offer", "offer_name", default=None, help="Catalog offer to apply.")
@click.option("--best-offer", is_flag=True, default=False, help="Apply the best eligible offer.")
def order_quote(order_id: int, offer_name: str | None, best_offer: bool) -> None:
    """Show the price breakdown of an order."""
    if offer_name and best_offer:
        raise click.ClickException("Use either --offer or --best-offer, not both")

    handler = QuoteOrderHandler(
        order_repo=order_repository(), profiles=settings().profiles
    )
    try:
        quote = handler.handle(order_id, offer_name=offer_name, best_offer=best_offer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quote for {quote.reference}  (#{quote.order_id})")
    click.echo(f"  {'Subtotal':<28} {quote.subtotal:>16}")
    if quote.offer_name:
        click.echo(f"  {'Offer: ' + quote.offer_name:<28} {'-' + quote.offer_discount:>16}")
    for tax in quote.taxes:
        click.echo(f"  {tax.name + ' (' + tax.rate + ')':<28} {tax.amount:>16}")
    click.echo(f"  {'Shipping':<28} {quote.shipping:>16}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Total':<28} {quote.total:>16}")
    click.echo(f"  {'Paid':<28} {quote.paid:>16}")
    click.echo(f"  {'Balance due':<28} {quote.balance_due:>16}")


@click.command("receive")
@click.option("--id", "order_id", required=True, type=int, help="Order ID being received.")
@click.option(
    "--items", "items_str", required=True,
    help="Counts as 'SKU:received/damaged/missing,...' (blank keeps the earlier count).",
)
def order_receive(order_id: int, items_str: str) -> None:
    """Record received, damaged and missing quantities."""
    counts = _parse_counts(items_str)
    handler = RecordReceiptHandler(order_repo=order_repository())

    try:
        receipt = handler.handle(order_id, counts)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{receipt.reference} #{receipt.order_id}: {receipt.status}")
    click.echo(
        f"Received {receipt.received} / {receipt.ordered}  "
        f"(damaged {receipt.damaged}, missing {receipt.missing})"
    )
    for item in receipt.items:
        click.echo(
            f"  {item.sku:<12} {item.received:>5}/{item.quantity:<5} "
            f"dmg {item.damaged:<4} miss {item.missing:<4} {item.status}"
        )


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID being paid.")
@click.option("--amount", required=True, help="Amount received, e.g. 2500.00.")
def order_pay(order_id: int, amount: str) -> None:
    """Record a payment against an order."""
    handler = RecordPaymentHandler(order_repo=order_repository())

    try:
        paid = handler.handle(order_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} paid so far: {paid}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
