"""Utility functions for the tool router."""

import json
import time
import uuid
from typing import Any, Optional


def generate_id(prefix: str = "") -> str:
    """Generate a unique ID with optional prefix."""
    unique_id = str(uuid.uuid4())
    return f"{prefix}_{unique_id}" if prefix else unique_id


def generate_request_id() -> str:
    """Generate a request ID for tracing."""
    return generate_id("req")


def normalize_store_domain(domain: str) -> str:
    """Strip scheme and trailing slashes from a store domain."""
    domain = domain.strip()
    for scheme in ("https://", "http://"):
        if domain.lower().startswith(scheme):
            domain = domain[len(scheme):]
            break
    return domain.rstrip("/")


def safe_json_loads(text: Any, default: Any = None) -> Any:
    """Safely parse JSON with default value."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError, ValueError):
        return default


class Timer:
    """Context manager for timing operations."""

    def __init__(self):
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time

    @property
    def duration_ms(self) -> float:
        """Get duration in milliseconds."""
        return self.duration * 1000 if self.duration else 0
