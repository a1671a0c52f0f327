"""Nodes, parameters and in-process publish/subscribe for robotics applications."""

__version__ = "0.0.1"

__all__ = ["bus", "comm", "errors", "listener", "node", "params", "talker"]