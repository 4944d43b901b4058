"""
Food Places API: Routes Package
===============================

Route Inventory:
    - health.py:       GET /, GET /health
    - food_places.py:  GET/POST /api/food-places, GET/PUT/DELETE /api/food-places/{id}

Routes stay thin: read the request, call the service, return the result.
"""
