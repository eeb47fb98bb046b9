# -*- coding: utf-8 -*-
# Trackline/trackline/topology/__init__.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Topology Subfolder:
-------------------
- orientation: strict counter-clockwise turn predicate (scalar and vectorized).
- hull:        convex hulls (quadrant filter, monotone chain) and input adapters.

`hull` depends on trackline.line.polygon, which itself uses `orientation`; import it
as `trackline.topology.hull` (or through trackline.api) rather than from here.
"""

from .orientation import cross2, is_strictly_ccw, turns_strictly_ccw

__all__ = ["orientation", "hull", "cross2", "is_strictly_ccw", "turns_strictly_ccw"]
