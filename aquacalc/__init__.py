"""
AquaCalc: aquaculture calculator service.

Deterministic pond, feed, stock and business calculators behind a FastAPI app.
"""

__version__ = "1.0.0"
