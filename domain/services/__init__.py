"""
Pure domain services (no I/O).

- history: pre-fill lookups, personal records and aggregate statistics
"""
