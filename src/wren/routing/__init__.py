"""Routing — ordered route table with positional ``:name`` parameters.

Routes are registered during setup and frozen before the listener
starts accepting connections.
"""
