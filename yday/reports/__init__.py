"""Reports package - markdown renderers for each CLI view."""
