"""
Service layer between the HTTP routes and the record store.
"""
