"""Repository layer: DB access helpers (SQLAlchemy Core, MySQL or SQLite).

Keep functions thin and focused: one parameterized statement each, so the DAO
and services never carry SQL strings.
"""
from __future__ import annotations
