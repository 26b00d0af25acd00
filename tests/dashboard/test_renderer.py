"""Tests for the Jinja2 dashboard renderer."""

import pytest
import requests

from listing_tracker.common.config import DisplaySettings
from listing_tracker.dashboard.controller import ViewController
from listing_tracker.dashboard.renderer import DashboardRenderer


@pytest.fixture
def renderer() -> DashboardRenderer:
    return DashboardRenderer()


@pytest.fixture
def controller(listing_store, clock) -> ViewController:
    controller = ViewController(listing_store, clock=clock, opener=lambda url: None)
    controller.start()
    return controller


class TestRenderOpportunities:
    def test_cards_and_overview(self, renderer, controller):
        html = renderer.render(controller.current_view())
        assert html.count('<article class="listing"') == 3
        assert "997.2 Carrera 4S" in html
        assert "€68,500" in html
        assert "+€5,500 potential gain (+8.0%)" in html
        assert "score-medium-high" in html
        assert "Connected to Supabase" in html
        assert "High Score Cars" in html

    def test_active_tab_marked(self, renderer, controller):
        html = renderer.render(controller.current_view())
        assert 'class="tab active" href="?tab=opportunities"' in html
        assert 'class="tab" href="?tab=watchlist"' in html

    def test_refresh_disabled_while_loading(self, renderer, controller):
        html = renderer.render(controller.current_view(), can_refresh=False)
        assert "disabled" in html
        assert "Loading..." in html

    def test_sample_data_status(self, renderer, listing_store, fake_source, clock):
        fake_source.fetch.side_effect = requests.ConnectionError("down")
        controller = ViewController(listing_store, clock=clock)
        controller.start()
        html = renderer.render(controller.current_view())
        assert "Using sample data (check connection)" in html
        assert "997.1 Carrera S" in html

    def test_empty_state(self, renderer, listing_store, fake_source, clock):
        fake_source.fetch.return_value = []
        controller = ViewController(listing_store, clock=clock)
        controller.start()
        html = renderer.render(controller.current_view())
        assert "No opportunities found." in html

    def test_escapes_listing_text(self, renderer, listing_store, fake_source, sample_listing_data, clock):
        fake_source.fetch.return_value = [{**sample_listing_data, "model": "<script>x</script>"}]
        controller = ViewController(listing_store, clock=clock)
        controller.start()
        html = renderer.render(controller.current_view())
        assert "<script>x</script>" not in html
        assert "&lt;script&gt;" in html


class TestRenderOtherTabs:
    def test_watchlist_empty(self, renderer, controller):
        controller.select_view("watchlist")
        html = renderer.render(controller.current_view())
        assert "No cars in your watchlist yet." in html

    def test_watchlist_with_bookmark(self, renderer, controller):
        controller.toggle_watch("b2")
        controller.select_view("watchlist")
        html = renderer.render(controller.current_view())
        assert html.count('<article class="listing"') == 1
        assert 'id="listing-b2"' in html

    def test_market(self, renderer, controller):
        controller.select_view("market")
        html = renderer.render(controller.current_view())
        assert "Market Intelligence" in html
        assert "Active Listings" in html
        assert '<article class="listing"' not in html

    def test_write(self, renderer, controller, tmp_path):
        path = renderer.write(controller.current_view(), tmp_path / "out" / "dashboard.html")
        assert path.exists()
        assert "<!DOCTYPE html>" in path.read_text(encoding="utf-8")


class TestRenderDisplaySettings:
    @pytest.fixture
    def display(self) -> DisplaySettings:
        return DisplaySettings(default_currency="GBP", currency_symbols={"EUR": "EUR ", "GBP": "£"})

    def test_card_uses_symbols(self, controller, display):
        html = DashboardRenderer(display=display).render(controller.current_view())
        assert "EUR 68,500" in html
        assert "+EUR 5,500 potential gain (+8.0%)" in html
        assert "€" not in html

    def test_average_price_uses_default_currency(self, controller, display):
        controller.select_view("market")
        html = DashboardRenderer(display=display).render(controller.current_view())
        assert "£51,667" in html
        assert "€" not in html
