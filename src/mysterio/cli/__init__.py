"""Command line tools: compare-configs, compare-secret, generate-template."""
