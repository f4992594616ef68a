"""AI travel planner relay: structured trip requests in, Gemini-generated JSON out."""

__version__ = "1.0.0"
