"""
Adapter implementations for the route network.

Adapters are concrete implementations of the port interfaces.
"""
