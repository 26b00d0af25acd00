"""Format listings and dashboard views as plain text."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from listing_tracker.common.config import DisplaySettings, settings

from .models import (
    TAB_LABELS,
    ListingRow,
    MarketView,
    OpportunitiesView,
    WatchlistView,
)

MISSING = "–"


def format_currency(
    amount: Optional[float],
    currency: str = "EUR",
    display: DisplaySettings | None = None,
) -> str:
    """Format an amount with its currency symbol and thousands separators.

    Args:
        amount: The amount, or None if unknown
        currency: ISO currency code of the amount
        display: Symbol table (defaults to settings.display)

    Returns:
        e.g. "€52,900", "-€1,200", or "–" for None
    """
    if amount is None:
        return MISSING
    display = display or settings.display
    symbol = display.currency_symbols.get(currency.upper(), f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.0f}"


def format_signed_currency(
    amount: float,
    currency: str = "EUR",
    display: DisplaySettings | None = None,
) -> str:
    """Currency with an explicit "+" for gains."""
    text = format_currency(amount, currency, display)
    return text if amount < 0 else f"+{text}"


def format_mileage(mileage: Optional[float]) -> str:
    if mileage is None:
        return MISSING
    return f"{mileage:,.0f} km"


def format_score(score: Optional[float]) -> str:
    if score is None:
        return MISSING
    return f"{score:.1f}/10"


def format_roi(roi: Optional[float]) -> str:
    """ROI with one decimal and explicit sign; "N/A" when undefined."""
    if roi is None:
        return "N/A"
    return f"{roi:+.1f}%"


def format_location(city: Optional[str], country: Optional[str]) -> str:
    parts = [p for p in (city, country) if p]
    return ", ".join(parts) if parts else MISSING


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return "never"
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_listing(row: ListingRow, display: DisplaySettings | None = None) -> str:
    """Format a single listing card.

    Args:
        row: The listing with its derived metrics
        display: Symbol table (defaults to settings.display)

    Returns:
        Multi-line text block
    """
    car = row.listing
    heart = " [watched]" if row.is_watched else ""
    lines = [
        f"{car.model} ({car.year}) · {format_score(car.investment_score)} "
        f"[{row.score_bucket.value}]{heart}",
        f"  Price: {format_currency(car.price, car.currency, display)}"
        f" · Market value: {format_currency(car.market_value, car.currency, display)}",
        f"  Potential gain: {format_signed_currency(row.potential_gain, car.currency, display)}"
        f" ({format_roi(row.roi_percentage)})",
    ]

    details = [
        format_mileage(car.mileage),
        format_location(car.city, car.country),
        car.transmission,
    ]
    if car.color:
        details.append(car.color)
    if car.rarity_score:
        details.append(f"rarity: {car.rarity_score}")
    lines.append("  " + " | ".join(details))

    seller = f"{car.source} · {car.seller_type}" if car.seller_type else car.source
    lines.append(f"  {seller} · id {car.id}")
    lines.append(f"  {car.url}")

    return "\n".join(lines)


def format_summary_lines(
    view: OpportunitiesView | MarketView,
    display: DisplaySettings | None = None,
) -> list[str]:
    display = display or settings.display
    summary = view.summary
    return [
        f"Total listings: {summary.total_listings}",
        f"Avg price: {format_currency(summary.rounded_average_price, display.default_currency, display)}",
        f"New today: {summary.new_today}",
        f"High score cars: {summary.high_score_count}",
    ]


def format_status_line(view: OpportunitiesView | MarketView) -> str:
    line = f"{view.status.label} · Updated: {format_timestamp(view.last_updated)}"
    if view.is_loading:
        line += " · Loading..."
    return line


def format_opportunities(view: OpportunitiesView, display: DisplaySettings | None = None) -> str:
    lines = [
        f"== {TAB_LABELS[view.tab]} ({len(view.rows)} found) ==",
        format_status_line(view),
        *format_summary_lines(view, display),
        "",
    ]
    if not view.rows and not view.is_loading:
        lines.append("No opportunities found. Check your Supabase connection.")
    lines.extend(format_listing(row, display) + "\n" for row in view.rows)
    return "\n".join(lines).rstrip() + "\n"


def format_watchlist(view: WatchlistView, display: DisplaySettings | None = None) -> str:
    lines = [f"== {TAB_LABELS[view.tab]} ({view.watched_count} watched) ==", ""]
    if view.watched_count == 0:
        lines.append("No cars in your watchlist yet.")
        lines.append("Add cars from the opportunities page to track them here.")
    else:
        lines.extend(format_listing(row, display) + "\n" for row in view.rows)
        if view.missing_count:
            lines.append(f"{view.missing_count} watched listing(s) not in the current load.")
    return "\n".join(lines).rstrip() + "\n"


def format_market(view: MarketView, display: DisplaySettings | None = None) -> str:
    lines = [
        f"== {TAB_LABELS[view.tab]} ==",
        format_status_line(view),
        *format_summary_lines(view, display),
        f"Watchlist: {view.watched_count}",
    ]
    if view.last_error:
        lines.append(f"Last error: {view.last_error}")
    return "\n".join(lines) + "\n"


def format_view(
    view: OpportunitiesView | WatchlistView | MarketView,
    display: DisplaySettings | None = None,
) -> str:
    """Render any dashboard view as text, using display for currency symbols."""
    if isinstance(view, OpportunitiesView):
        return format_opportunities(view, display)
    if isinstance(view, WatchlistView):
        return format_watchlist(view, display)
    return format_market(view, display)
