"""Dataset export layer.

This package converts cleaned datasets to typed records and writes
cleaned data and report tables to local files.
"""
