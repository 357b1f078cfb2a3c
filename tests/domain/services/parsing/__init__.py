"""Parsing service tests."""
