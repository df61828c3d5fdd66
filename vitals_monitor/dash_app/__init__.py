"""Dash presentation layer for the vitals monitor."""
