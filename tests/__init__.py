"""Tests for elysia-docs."""
