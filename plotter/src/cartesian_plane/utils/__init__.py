"""Utilities: coordinate transforms, drawing surfaces, logging."""
