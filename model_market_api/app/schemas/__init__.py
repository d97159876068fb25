"""
Pydantic schema definitions for API payloads.

Request bodies are free‑form documents: the schemas document the
well‑known fields but accept any extra keys, which are stored as given.
"""
