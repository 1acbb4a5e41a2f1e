"""Shared models and utilities used across readers, the transformer and mappers."""
