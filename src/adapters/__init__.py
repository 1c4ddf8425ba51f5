"""Inbound adapters package."""
