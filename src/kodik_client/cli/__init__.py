"""CLI layer — argument parsing, rendering, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra`` and ``settings``, but no other layer may
import from ``cli``.
"""
