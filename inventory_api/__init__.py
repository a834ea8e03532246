"""E-commerce inventory API: categories, products and tags over REST."""

__version__ = "0.1.0"
