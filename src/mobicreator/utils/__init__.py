"""Utility helpers for mobicreator."""
