# Listing Tracker
"""
Client-side data and view layer for ranked vehicle listings:
- common: models, config, logging, HTTP client
- listings: remote retrieval and session state
- metrics: derived investment figures
- watchlist: bookmarks
- dashboard: tab state, views, rendering, CLI
"""
