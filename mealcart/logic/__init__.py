"""Core business logic layer.

Subpackages:
- shopping: name normalization, quantity classification, shopping list aggregation
- reporting: calorie and cost statistics
- planning: automatic weekly plans
- catalog: recipe search and filters
"""
__all__ = ["shopping", "reporting", "planning", "catalog"]
