"""Job feed package.

The package is structured as a small pipeline:
- `models.py` defines the unified schema every source is mapped onto.
- `sources/` contains per-source connectors that fetch and normalize jobs.
- `aggregator.py` fetches all sources concurrently and derives filter facets.
- `filters.py` narrows the catalog for a given filter selection.
- `sanitize.py` turns HTML descriptions into plain text for display.
"""
