"""Services: input parsing, plane commands, headless rendering."""
