"""staticize application layer: analysis, services and reporters."""
