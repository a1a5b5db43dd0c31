"""Plots for benchmark runs."""
