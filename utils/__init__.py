"""Shared helpers for the occupation normalization pipeline."""
