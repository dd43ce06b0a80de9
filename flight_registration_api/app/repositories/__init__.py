"""
Record stores wrapping the SQLite tables.
"""
