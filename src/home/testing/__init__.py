"""Test utilities for home applications::

    from home.testing import TestClient
"""

from home.testing.client import ClientResponse, TestClient

__all__ = ["ClientResponse", "TestClient"]
