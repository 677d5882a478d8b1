"""Request parameter binding: typed query-parameter binder and its sample API."""

__version__ = "1.0.0"
