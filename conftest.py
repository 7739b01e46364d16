"""Shared pytest setup: render headless."""
import matplotlib

matplotlib.use("Agg")
