"""Promptbook: reusable prompt templates with bracket placeholders."""
