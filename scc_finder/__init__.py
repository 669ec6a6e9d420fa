#!/usr/bin/env python3

from .cycles import detect_cycles, is_cyclic
from .tarjan import components_of_mapping, strongly_connected_components

__version__ = "0.1.0"

__all__ = [
    "components_of_mapping",
    "detect_cycles",
    "is_cyclic",
    "strongly_connected_components",
]
