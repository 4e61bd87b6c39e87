"""Traversal of a directory into a summary tree.

This package walks a directory with ignore-file and exclusion support, classifies
files as text or binary, and accumulates the accepted entries into a renderable tree.
"""
