"""Runnable examples for the lander package."""
