"""
Top‑level package for the Carreras API.

This file makes ``carreras_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``carreras_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
