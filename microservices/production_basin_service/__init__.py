"""
Production Basin Service

Assigns users to production basins. The request body is validated (shape,
then a batched existence lookup) before any assignment is written.
"""

__version__ = "1.0.0"
__service__ = "production_basin_service"
