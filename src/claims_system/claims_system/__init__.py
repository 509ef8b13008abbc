"""Lecturer Claims System package.

This package is organized by feature modules (users, claims, documents,
navigation) with a thin Flask controller layer over in-memory service and
repository layers.
"""
