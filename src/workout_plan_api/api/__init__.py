"""HTTP routes for the workout plan API."""
