"""
Version 1 of the API.

Bundles the people, projects and tasks endpoints served under
``/api/v1``.
"""
