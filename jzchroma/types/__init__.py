from .format_type import FormatType, channel_maxima
from .color_types import ScalarTriple, ColorSpace, PIPELINE_SPACES, element_to_array

__all__ = [
    "FormatType",
    "channel_maxima",
    "ScalarTriple",
    "ColorSpace",
    "PIPELINE_SPACES",
    "element_to_array",
]
