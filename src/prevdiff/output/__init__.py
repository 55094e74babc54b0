"""Renderers for diff requests and remote listings."""
