"""Adapters: HTTP access to the backend and file exporters."""
