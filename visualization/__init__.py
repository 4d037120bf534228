"""Plotting helpers for optimization runs."""
