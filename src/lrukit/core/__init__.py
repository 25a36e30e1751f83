"""Recency list and LRU cache."""
