"""
Entities: plain records for fish and sharks. They hold a position and their
timers only; the board is the authority on occupancy.
"""
from dataclasses import dataclass

from .geometry import Point


@dataclass
class Fish:
    pos: Point
    breed: int = 0


@dataclass
class Shark:
    pos: Point
    breed: int = 0
    starve: int = 0
