"""Interfaces/abstractions of the Core.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: services depend on abstractions, the CLI picks the
  concrete encoding and output once at startup.
"""
