"""Outward-facing interfaces."""
