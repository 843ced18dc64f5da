"""Conversion between absolute file URIs and persistable URIs."""
