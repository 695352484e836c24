"""Blogging API backend."""
