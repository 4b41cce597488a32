"""Shared helpers for DocLocale."""
