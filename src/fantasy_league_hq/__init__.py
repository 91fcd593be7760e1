"""Data loading and aggregation for the league headquarters site."""
