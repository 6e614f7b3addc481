"""Configuration package for the hole simulation.

Constant modules hold the tuned defaults; ``simulation_config`` groups them
into dataclasses that a simulation is built from.
"""
