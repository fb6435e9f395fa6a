"""Management surface for the desktop UI."""
