"""
Core domain models, mathematical primitives, and invariants.

Pure computations with no I/O: arithmetic of the value domain,
the CNF encoder and the structures derived from it.
"""
