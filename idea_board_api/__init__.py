"""
Top‑level package for the Idea Board API.

This file makes ``idea_board_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``idea_board_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
