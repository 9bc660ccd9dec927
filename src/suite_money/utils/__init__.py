"""Small helpers shared across suite_money."""
