"""bfn — deterministic data-normalization primitives."""

__version__ = "2.0.1"
