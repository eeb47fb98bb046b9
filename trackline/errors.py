# -*- coding: utf-8 -*-
# Trackline/trackline/errors.py


"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Provide typed exceptions for the geometry core with compact, context-aware messages
so that hull construction, polyline queries and sub-line extraction report failures
the same way.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidInputError, OutOfRangeError,
       DegenerateResultError, InternalInconsistencyError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- The three caller-facing errors also derive from ValueError, the defect signal
  derives from RuntimeError, so plain `except ValueError` call sites keep working.
"""

__all__ = [
    "GeometryError",
    "InvalidInputError",
    "OutOfRangeError",
    "DegenerateResultError",
    "InternalInconsistencyError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for all errors raised by the geometry core.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"position": 7.5, "length": 7.0}).

    Notes
    -----
    - Subclasses inherit the same constructor.
    - __str__ appends a compact context suffix for faster debugging.
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(GeometryError, self).__init__(message)

    def __str__(self):
        base = super(GeometryError, self).__str__()
        return base + _format_context(self.context)


class InvalidInputError(GeometryError, ValueError):
    """
    Malformed caller input:
      - None or empty point collections
      - fewer points than required
      - duplicate-adjacent or non-finite coordinates
      - malformed interval bounds or parameter sets
    """


class OutOfRangeError(GeometryError, ValueError):
    """
    Index, position or fraction outside its domain, or a non-finite numeric argument.
    """


class DegenerateResultError(GeometryError, ValueError):
    """
    A computation produced something that cannot be a valid result:
      - a hull with fewer than 3 vertices
      - an extraction interval that collapses after rounding
    """


class InternalInconsistencyError(GeometryError, RuntimeError):
    """
    An invariant that validated input should guarantee did not hold (defect signal).
    """
