"""rbaclite command line interface."""
