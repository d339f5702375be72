from .airline import build_airline_tools

__all__ = ["build_airline_tools"]
