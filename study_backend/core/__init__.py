"""Core domain logic: text processing and exceptions."""
