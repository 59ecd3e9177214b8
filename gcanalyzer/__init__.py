"""Gas chromatography tools for refrigerant samples: reading, smoothing, comparing, optimising and plotting."""

__version__ = "0.1.0"

__all__ = ["__version__"]