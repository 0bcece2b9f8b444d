"""
Pytest configuration.

Keeps the repository root importable so the packages resolve without an
editable install.
"""
