"""Core conversion, case-mapping and hex-encoding functions.

WHY: These are the pure functions every other layer (CLI, callers
importing ``strutil``) builds on. Keeping them in one package with no
I/O makes them trivially thread-safe and testable.

HOW: scalars.py describes target types, conversion.py turns values into
text and back, casing.py maps bytes through the code page casing bands,
hexenc.py dumps bytes as hex.

RULES:
- No module here reads or writes shared mutable state
- Inputs are never mutated; every transform returns a new object
"""
