"""Typed async fetch-and-decode for OpenID4VP wallet clients."""

__version__ = "0.1.0"
