"""Detect package version bumps in a pull request and collect their changelogs."""
