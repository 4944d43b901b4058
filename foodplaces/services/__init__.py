"""
Food Places API: Services Layer
===============================

Sits between routes (HTTP) and stores (persistence).

Service Inventory:
    - FoodPlaceService: maps Found / NotFound / Failure store results to
      records or application exceptions
"""
