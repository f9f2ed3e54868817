"""
Demo catalog.

A small, seeded storefront used by the CLI and by integration tests.
"""

from steam_catalog.demo.builder import build_demo_system

__all__ = [
    "build_demo_system",
]
