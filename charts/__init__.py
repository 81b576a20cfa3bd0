"""Plotly charts and tables."""
