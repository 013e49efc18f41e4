"""Presentation layer: public API and command line."""
