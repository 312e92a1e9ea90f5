"""Core business logic layer.

Subpackages:
- grocery: deriving the grocery list from the meal plan and syncing it
"""
__all__ = ["grocery"]
