"""Argument conversion, service API models, a service proxy and console output formatting."""

__version__ = "0.1.0"

__all__ = [
    "api",
    "colors",
    "compat",
    "errors",
    "jsonfmt",
    "labels",
    "listing",
    "logformat",
    "options",
    "output",
    "proxy",
    "tabwriter",
]