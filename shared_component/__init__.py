"""Scaffold React components shared between web and React Native."""

__version__ = "0.1.0"
