"""Read-only reporting queries over the cleaned dataset.

Every query is a pure function of the cleaned frame. Queries have no
ordering dependency on one another.
"""
