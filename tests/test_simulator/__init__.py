"""
Simulator Tests

Tests for the SimPy host and end-to-end runs of the dispatcher.
"""
