# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    INT16 = "int16"
    FLOAT = "float"
    PERCENTAGE = "percentage"


channel_maxima = {
    FormatType.INT: 255,
    FormatType.INT16: 65535,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0,
}
