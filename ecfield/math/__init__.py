from .curve import Curve, CurvePoint  # noqa: F401
from .field import FieldElement  # noqa: F401
