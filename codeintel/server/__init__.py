# -*- coding: utf-8 -*-
# The MCP binding is lazy-loaded so that tool handlers and resources can
# be used (and tested) without importing the mcp package.
# pylint: disable=undefined-all-variable
__all__ = ["create_server", "run_server"]


def __getattr__(name: str):
    if name in __all__:
        from . import app

        return getattr(app, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
