"""
Core utilities shared across the salon backend.

This package hosts configuration, logging setup, error rendering, password
hashing and the login rate limiter. Routers and services depend on these
primitives instead of reading os.environ or building responses by hand.
"""
