"""
Local support library for the invoice filters package.

Modules:
    logs: Logging utilities
    paths: Path utilities
    caches: Disk-based caching with TTL support
    observables: Single-writer observable value holders
"""

from invoice_filters.lib import caches, logs, observables, paths

__all__ = ["caches", "logs", "observables", "paths"]
