"""
API package containing the HTTP routes.

``router`` aggregates the per-domain routers from ``endpoints`` and is
mounted under ``/api`` by the application factory.
"""
