"""Management scripts (python -m captainslog.scripts.<name>)."""
