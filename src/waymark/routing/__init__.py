"""Routing — ordered route table with linear segment matching.

Routes are registered during setup; each request is matched against
the patterns in registration order.
"""

from waymark.routing.pattern import Segment, match_pattern, parse_pattern, split_path
from waymark.routing.table import LookupResult, Route, RouteTable

__all__ = [
    "LookupResult",
    "Route",
    "RouteTable",
    "Segment",
    "match_pattern",
    "parse_pattern",
    "split_path",
]
