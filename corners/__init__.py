"""
Corners Puzzle Package
======================

Seeded generation and validation engine for the "Corners" puzzle module.

Submodules:
- core: Constants, enums and the rule-seed random number generator
- generation: Maze construction and corner colour assignment
- simulation: Shortest-path solution search and press validation
- pipeline: Module lifecycle wiring against an external host
- utils: Graph and grid helpers for inspecting generated mazes

Data flow:
    MonoRandom -> Maze -> Assignment -> PathOptimizer -> Solution -> InputValidator
"""

__version__ = "1.0.0"
__author__ = "Corners Module Project"

__all__ = ['core', 'generation', 'simulation', 'pipeline', 'utils']
