"""Tenant Registry: create, fetch and list tenant records over HTTP."""

__version__ = "0.1.0"
