"""Connectors to byte-level key-value stores holding endpoint records."""
from __future__ import annotations
