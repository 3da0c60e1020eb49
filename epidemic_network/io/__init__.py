"""Artifact schemas, output paths, and Parquet persistence."""
