"""
Command-line interface for rescript-toolchain.
"""

from .main import create_parser, main

__all__ = ["create_parser", "main"]
