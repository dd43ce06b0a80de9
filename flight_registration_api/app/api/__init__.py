"""
HTTP routes.  ``router.py`` aggregates the domain routers in
``endpoints`` and is mounted under ``/api`` by the application.
"""
