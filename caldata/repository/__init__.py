"""Repository layer: read-only SQL over the Calendar.app SQLite schema.

Keep functions thin and focused, so services avoid SQL strings.
"""
from __future__ import annotations
