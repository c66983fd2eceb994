"""Tests for phrase dictionary indexing, conversion passes and the command line tool."""
