"""Optimization loop, steppers and logging setup."""
