"""ProjectDesk command line interface."""
