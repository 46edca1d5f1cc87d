"""
Luhn Validation Server

A small HTTP service that checks card numbers against the Luhn checksum.
"""

__version__ = "1.0.0"
