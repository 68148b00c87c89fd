"""Differential fuzz testing suite for polycoll."""

from .fuzz import Fuzzer, FuzzRunner, random_value, run_suite

__all__ = ["Fuzzer", "FuzzRunner", "random_value", "run_suite"]
