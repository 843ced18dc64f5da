"""Symbolic storage roots and the registries that resolve them."""
