from viennaflow.models.base import Base
from viennaflow.models.line import Line
from viennaflow.models.platform import Platform
from viennaflow.models.station import Station

__all__ = ["Base", "Station", "Line", "Platform"]
