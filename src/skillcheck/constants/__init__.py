"""Constant tables shared across skillcheck modules."""
