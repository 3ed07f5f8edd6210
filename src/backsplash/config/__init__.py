"""Defaults and environment configuration for the backsplash engine."""
