"""Consistency checks for built game trees."""

from .tree_checks import TreeConsistencyError, validate_node, validate_tree

__all__ = ["TreeConsistencyError", "validate_node", "validate_tree"]
