class GradientError(ValueError):
    """Raised (or recorded on an InvalidGradient) when stops and offsets do not form a gradient."""
