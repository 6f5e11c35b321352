"""Utilities used by the vortex model."""
