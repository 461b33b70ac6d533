"""Core building blocks: exceptions, logging, configuration and utilities."""
