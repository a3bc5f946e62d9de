"""
Helpers for managing content, users and groups of an instance through its REST API.
"""
