"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource collection (users, ideas, funds, votes,
comments, chat messages and the activity log) is served by a service
in ``services`` and exposes a router defined in ``api/v1/endpoints``.
Persistence is abstracted behind the record store in
``core.storage`` so that backends can be swapped without touching
the API handlers.
"""

from .main import app  # noqa: F401
