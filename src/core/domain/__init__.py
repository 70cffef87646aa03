"""Domain models and entities.

Why:
- Pure data structures (Pydantic v2) and the closed variant sets live here.
- The domain knows nothing about files, encodings or the CLI.
"""
