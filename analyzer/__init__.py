"""
HTML deepest-text analyzer.
"""

__version__ = "0.1.0"
