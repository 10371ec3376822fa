"""
mtdata - Market data and indicator access layer

Normalizes quote, instrument metadata and technical indicator access across
trading-terminal API generations behind one stable interface.
"""

__version__ = "0.1.0"
__author__ = "mtdata Team"
