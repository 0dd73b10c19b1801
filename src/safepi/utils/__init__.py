"""Utility helpers for SafePI."""
