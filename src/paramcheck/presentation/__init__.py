"""paramcheck presentation layer."""
