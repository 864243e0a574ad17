"""Kernel – errors, cancellation and timing primitives shared by every layer."""
