"""
Core numeric primitives, domain models, and their invariants.

Everything here is pure or single-owner state; console I/O lives in
src.lessons and src.cli.
"""
