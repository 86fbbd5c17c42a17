"""Tests for the sharedparams.files package."""
