"""Optimizer parameters and problem-file loading."""
