"""
Async-Native Content Generators
===============================

Generators built on Pydantic models and httpx.
"""

from .base import AsyncContentGenerator
from .openrouter import OpenRouterContentGenerator, create_content_generator

__all__ = [
    "AsyncContentGenerator",
    "OpenRouterContentGenerator",
    "create_content_generator",
]
