"""Helpers for S-57 chart datasets: update-cell grouping, configuration files, number parsing, UTF-8/UCS-2 codecs and logging."""

__version__ = "0.1.0"