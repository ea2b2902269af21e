"""Test suite for forest-fire percolation."""
