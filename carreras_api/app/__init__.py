"""
Application package initializer.

This package contains the application factory and all of its
submodules.  Careers and subjects each have their own schema, service
and endpoint modules; the key-value store integration lives in
``core.store`` and is shared by both domains.
"""
