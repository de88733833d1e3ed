"""Unit tests for the core probe loop.

These tests exercise the loop and its exclusion policy without network
access. All ports are replaced with in-memory fakes from tests/fakes/.
"""
