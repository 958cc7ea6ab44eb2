"""Route handlers for status simulator."""

from .default_handler import DefaultHandler, HELP_TEXT
from .simulate_handler import SimulateHandler

# Table-driven dispatch, first matching prefix wins
ROUTE_HANDLERS = {
    '/simulate/': SimulateHandler,
    '/': DefaultHandler,
}

__all__ = [
    'ROUTE_HANDLERS',
    'HELP_TEXT',
    'DefaultHandler',
    'SimulateHandler',
]
