"""
Version 1 of the API.

The board's clients address resources at the root path (``/ideas``,
``/votes`` ...), so this version is mounted without a prefix.  A
future breaking revision should live in its own subpackage (e.g.
``v2``) mounted under a prefix.
"""
