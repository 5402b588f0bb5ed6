"""Agents that play games through the search algorithms."""

from .search_agent import SearchAgent

__all__ = ["SearchAgent"]
