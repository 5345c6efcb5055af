"""Command line and config file surfaces for java-format options."""
