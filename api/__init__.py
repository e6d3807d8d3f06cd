"""HTTP boundary for the quiz session."""
