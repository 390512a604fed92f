"""Rust Labs static data lookups: craft, research, recycle and durability."""
