"""Process-wide data access for the Dash callbacks."""
