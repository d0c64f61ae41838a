"""Test suite for linalgkit."""
