"""Infrastructure: persistence and hosted model clients."""
