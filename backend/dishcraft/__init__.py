"""
DishCraft backend: ingredient and recipe-component store plus the enrichment run
that grows it from an external recipe source.
"""
__version__ = "0.1.0"
