"""Test fixtures for overview navigator tests."""
