"""Tests for the sharedparams.utilities package."""
