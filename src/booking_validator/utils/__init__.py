"""Shared utilities: logging, file reading and the text-format reader."""
