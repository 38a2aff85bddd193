"""Bookstore core: catalog queries and cart aggregation.

Pieces:
- Immutable in-memory catalog with the storefront seed list
- Query engine: category/price/rating/text filters plus stable sorting
- Cart aggregator with a recomputed running total
- Checkout stub over a payment gateway placeholder
- Recent search history for the search screen
- Dataclass configuration and pure-function validation rules
"""
