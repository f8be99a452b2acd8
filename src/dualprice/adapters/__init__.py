"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- DOM (HTML documents and page fetching)
- Parsing (price extraction)
- Formatting (label output)
"""

__all__ = []
