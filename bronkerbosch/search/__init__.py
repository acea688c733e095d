"""Bron-Kerbosch search engine, pivot selection and maximum extraction."""
