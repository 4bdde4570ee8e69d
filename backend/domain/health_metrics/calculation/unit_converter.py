"""Unit conversion to the canonical metric units used by the engine."""

INCHES_PER_FOOT = 12
CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592


def height_to_cm(feet: float, inches: float) -> float:
    """Convert feet + inches to centimeters.

    Example:
        >>> round(height_to_cm(5, 10), 2)
        177.8
    """
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def weight_to_kg(pounds: float) -> float:
    """Convert pounds to kilograms.

    Example:
        >>> round(weight_to_kg(150), 2)
        68.04
    """
    return pounds * KG_PER_POUND
