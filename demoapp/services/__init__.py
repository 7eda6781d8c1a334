"""
Use cases for the users demo API.

Routers call these services instead of touching the JSON file or the
in-memory store directly.
"""
