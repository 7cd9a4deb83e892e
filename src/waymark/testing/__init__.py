"""Test utilities for waymark routers::

    from waymark.testing import TestClient
"""

from waymark.testing.client import TestClient

__all__ = ["TestClient"]
