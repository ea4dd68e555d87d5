"""maniastrip command-line interface."""
