"""Interval-based soccer scoring model with offer validation and outcome queries."""

__version__ = "0.1.0"