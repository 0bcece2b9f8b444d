"""Command line front-end for the textformats engine."""
