"""Inference for pre-trained machine-learning models and zero-dimensional homology analysis."""

__version__ = "0.1.0"