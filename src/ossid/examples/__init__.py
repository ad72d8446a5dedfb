"""Runnable ossid examples."""
