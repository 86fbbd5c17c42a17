"""Tests for the sharedparams.lib package."""
