"""Raw dataset ingestion and cleaning orchestration.

This package reads raw layoff exports, validates their structure,
and runs the ordered cleaning stages over a staging copy.
"""
