"""Core runner machinery.

The variant contract, input loading, the day registry and the execution
harness that ties them together.  Kept free of eager imports so that day
modules can depend on :mod:`aoc2023.core.contract` without pulling in the
registry.
"""

from __future__ import annotations
