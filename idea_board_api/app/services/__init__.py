"""
Service layer abstraction.

Each service encapsulates the rules of one collection (uniqueness
keys, size ceilings, positional or keyed deletes) on top of the
record store.  Services never touch files directly, so the storage
backend can be swapped without changing API handlers.
"""
