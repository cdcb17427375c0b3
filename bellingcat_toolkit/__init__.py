"""
Bellingcat toolkit catalog

Merges the remote Bellingcat tool list with built-in tools, filters it by
category and free text, and exports the filtered view to XLSX and PDF.
"""

__version__ = "0.1.0"
