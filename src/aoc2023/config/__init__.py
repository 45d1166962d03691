"""Environment-driven configuration."""

from __future__ import annotations
