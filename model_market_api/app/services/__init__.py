"""
Service layer.

Each service wraps one MongoDB collection and holds the store
operations for its record type, so API handlers only deal with
request parsing and response envelopes.
"""
