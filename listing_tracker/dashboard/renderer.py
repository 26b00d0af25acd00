"""
Dashboard Renderer.
Handles Jinja2 template loading and HTML rendering of dashboard views.
"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from listing_tracker.common.config import DisplaySettings, settings

from . import formatter
from .models import TAB_LABELS, ViewTab


class DashboardRenderer:
    """
    Renders dashboard views to a standalone HTML page.

    Usage:
        renderer = DashboardRenderer()
        html = renderer.render(controller.current_view())
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        display: Optional[DisplaySettings] = None,
    ):
        """
        Initialize the dashboard renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
            display: Currency symbols and default currency.
                     Defaults to settings.display.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.display = display or settings.display
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(
            currency=self._currency,
            signed_currency=self._signed_currency,
            mileage=formatter.format_mileage,
            score=formatter.format_score,
            roi=formatter.format_roi,
            timestamp=formatter.format_timestamp,
        )
        self.env.globals["location"] = formatter.format_location

    def _currency(self, amount: Optional[float], currency: Optional[str] = None) -> str:
        return formatter.format_currency(
            amount, currency or self.display.default_currency, self.display
        )

    def _signed_currency(self, amount: float, currency: Optional[str] = None) -> str:
        return formatter.format_signed_currency(
            amount, currency or self.display.default_currency, self.display
        )

    def render(self, view: Any, can_refresh: bool = True) -> str:
        """
        Render a complete dashboard page for one view.

        Args:
            view: OpportunitiesView, WatchlistView or MarketView
            can_refresh: Whether the refresh control is enabled

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template("dashboard.html.jinja2")
        return template.render(
            view=view,
            tabs=[(tab.value, TAB_LABELS[tab]) for tab in ViewTab],
            active_tab=view.tab.value,
            active_label=TAB_LABELS[view.tab],
            can_refresh=can_refresh,
        )

    def write(self, view: Any, path: Path, can_refresh: bool = True) -> Path:
        """Render a view and write it to a file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(view, can_refresh=can_refresh), encoding="utf-8")
        return path
