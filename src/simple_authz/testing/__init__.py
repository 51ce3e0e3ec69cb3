"""Testing helpers – hypothesis strategies and pytest fixtures.

Import the fixtures into a ``conftest.py`` to make them available.
"""
