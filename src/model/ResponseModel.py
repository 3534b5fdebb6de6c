from dataclasses import dataclass


@dataclass
class ProcessResponse:
    id: str


@dataclass
class PointsResponse:
    points: int
