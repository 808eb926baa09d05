"""Counting strategies and the engine that selects between them."""
from rookpad.counting import dynamic, enumeration
from rookpad.counting.engine import CountingEngine, get_default_engine, count

__all__ = ['dynamic', 'enumeration', 'CountingEngine', 'get_default_engine', 'count']
