"""
Application Layer for the LiftMind API.

This package contains:
- ports/: Abstract repository and coach interfaces (what the domain needs)
- use_cases/: Workflows that confirm coach actions, log workouts and build metrics
- exceptions: Errors raised across the application boundary
"""
