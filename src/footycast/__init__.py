"""
FootyCast: today's football match predictions, proxied and displayed.
"""

__version__ = "0.1.0"
