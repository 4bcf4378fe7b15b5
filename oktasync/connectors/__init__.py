"""Datasource connectors."""
