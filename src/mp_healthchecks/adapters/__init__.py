"""Adapters – transport integrations exposing the health report."""
