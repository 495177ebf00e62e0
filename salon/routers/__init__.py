"""
FastAPI routers grouped by area (admin, products, bookings, media, pages).

Each module exposes an APIRouter that app.py includes. Routers translate HTTP
requests into service calls and service results into responses.
"""
