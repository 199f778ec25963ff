"""
Product package for catalog operations.
"""

from .service import ProductService

__all__ = ['ProductService']
