"""Tests for the sharedparams package."""
