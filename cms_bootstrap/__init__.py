"""
CMS bootstrap layer.

Discovers installed plugins, merges them with persisted configuration rows
and writes the result into the snapshot artifact read at startup.
"""

__version__ = "1.0.0"
