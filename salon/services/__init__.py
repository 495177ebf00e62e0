"""
High-level use cases for the salon backend.

Each service module orchestrates the record store, uploads and sessions to
implement one area (admin accounts, products, bookings, media, profiles).
Routers call these services instead of touching the JSON tables directly.
"""
