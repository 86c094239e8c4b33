"""
Markov chain engine with order-1 and order-2 word sentence generators.
"""

__version__ = "1.0.0"
