"""Razzies producer-interval service.

Reads the Golden Raspberry Awards movie list and reports which producers
went the longest and the shortest between two consecutive wins.
"""

__version__ = "0.1.0"
