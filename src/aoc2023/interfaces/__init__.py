"""User-facing rendering."""

from __future__ import annotations
