"""Dialogue agent integration."""
