"""Qt user interface for Promptbook."""
