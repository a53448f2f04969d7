"""Workout plan generation and parsing API."""
