"""
Utility functions module.

Rounding helpers that follow the platform's conventions and conversions of
platform timestamps to UTC datetimes.
"""
