"""homebase — profile editor TUI with a home base location screen."""
