"""Advent of Code puzzle solvers for 2018, 2019 and 2020, and an Intcode machine."""

__version__ = "0.1.0"