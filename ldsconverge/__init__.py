"""Convergence experiments for white noise, stratified and low-discrepancy 1D sequences."""

__version__ = "0.1.0"