"""Objective interface, parameters, benchmark problems and errors."""
