from typing import Optional


Coordinate = tuple[int, int]
Line = list[Coordinate]
Axis = str
TraceLog = list[str]
TraceStep = dict[str, object]
GridRows = list[str]
OptionalCoordinate = Optional[Coordinate]
