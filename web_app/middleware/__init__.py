"""Middleware for the link shortener web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
