"""
Actor Service

Events raised when actors (exporters, buyers, producers, OPAs) change status
or are linked to one another.
"""

__version__ = "1.0.0"
__service__ = "actor_service"
