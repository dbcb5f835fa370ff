"""
Pydantic schema definitions for API payloads.

Records on the board are loosely typed: the store keeps whatever
fields the caller supplied.  The schemas here only require the
fields a service needs to enforce its rules (natural keys, lookup
keys) and let every other field through untouched.
"""
