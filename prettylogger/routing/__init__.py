"""Routing module - Output stream fan-out"""

from prettylogger.routing.output_router import OutputRouter

__all__ = [
    "OutputRouter",
]
