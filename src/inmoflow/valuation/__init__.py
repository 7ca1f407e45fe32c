"""
Tasación heurística de inmuebles.
"""

from inmoflow.valuation.estimator import PriceEstimator, estimate_price

__all__ = [
    "PriceEstimator",
    "estimate_price",
]
