"""Flight planning for the crop-spraying drones: routes over the field grid and their motion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, MutableSequence, Sequence

_GRID_LEFT = 110
_GRID_BOTTOM = 470
_CELL = 20
# Pixels a drone covers per frame along its dominant axis.
_SPEED = 1.5
# How close (per axis, in whole pixels) a drone must get to count as arrived.
_ARRIVAL = 5
_FAR = 99999.99
# Route points are cell corners; the drone sprite is drawn from this offset.
_SPRITE_OFFSET = 10

Record = Sequence[MutableSequence[int]]


@dataclass(frozen=True)
class Point:
    """A point on the screen, in pixels."""

    x: int
    y: int


def _as_point(value: Point | Sequence[int]) -> Point:
    if isinstance(value, Point):
        return value
    return Point(int(value[0]), int(value[1]))


def _shift(point: Point, by: int) -> Point:
    return Point(point.x + by, point.y + by)


def _corner(i: int, j: int) -> Point:
    """Top-left screen corner of grid cell (row i, column j)."""
    return Point(_GRID_LEFT + j * _CELL, _GRID_BOTTOM - _CELL - i * _CELL)


def _is_house(value: int) -> bool:
    return 3 <= value <= 6


def _needs_spray(value: int) -> bool:
    return 10 <= value <= 99 and value % 10 != 0


def _cells(record: Record) -> Iterator[tuple[int, int, int]]:
    for i, row in enumerate(record):
        for j, value in enumerate(row):
            yield i, j, value


def distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return math.sqrt(abs((a.x - b.x) ** 2 + (a.y - b.y) ** 2))


def relative_position(a: Point, b: Point, c: Point) -> float:
    """Side of line AB that C lies on: positive on one side, negative on the other, 0 on it."""
    return float((b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x))


def projection(a: Point, b: Point, c: Point) -> float:
    """Signed length of the projection of AC onto the direction of AB."""
    abx, aby = b.x - a.x, b.y - a.y
    acx, acy = c.x - a.x, c.y - a.y
    length = math.sqrt(abs(abx * abx + aby * aby))
    if length == 0:
        raise ValueError("A and B coincide; the line AB has no direction")
    return (abx * acx + aby * acy) / length


def x_record_to_screen(x: int) -> int:
    """Screen x of the drone sprite for grid column x."""
    return _GRID_LEFT + x * _CELL + 5


def y_record_to_screen(y: int) -> int:
    """Screen y of the drone sprite for grid row y."""
    return _GRID_BOTTOM - y * _CELL - _CELL + 5


def interpolate(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Positions at which a single drone is drawn while flying from (x1, y1) to (x2, y2).

    The drone advances about 1.5 pixels per frame along the longer axis; the
    last position is drawn one step beyond the target, as the animation does.
    """
    steps = max(abs(x2 - x1), abs(y2 - y1), 1)
    steps = max(int(steps / _SPEED), 1)
    step_x = (x2 - x1) / steps
    step_y = (y2 - y1) / steps
    x, y = float(x1), float(y1)
    positions = []
    for _ in range(steps + 1):
        positions.append(Point(int(x), int(y)))
        x += step_x
        y += step_y
    positions.append(Point(int(x), int(y)))
    return positions


def hand_route_segments(route: Iterable[Point | Sequence[int]]) -> list[tuple[Point, Point]]:
    """Consecutive legs of a hand-drawn route, up to a point whose x is -1."""
    points = [_as_point(p) for p in route]
    segments = []
    for start, end in zip(points, points[1:]):
        if end.x == -1:
            break
        segments.append((start, end))
    return segments


def detect_route(record: Record, start: Point) -> list[Point]:
    """Inspection route: from the start over every planted cell in grid order and back."""
    home = _shift(start, _SPRITE_OFFSET)
    route = [home]
    route.extend(
        _shift(_corner(i, j), _SPRITE_OFFSET) for i, j, value in _cells(record) if value >= 10
    )
    route.append(home)
    return route


def spray_routes(record: Record, count: int) -> list[list[Point]]:
    """Plan spraying routes for `count` drones, one starting at each house in grid order.

    Drones take turns claiming the sick plant nearest to where each one last
    stopped, until every sick plant is claimed; each route then returns to its
    house. Every sick cell of `record` is treated in place: its value drops by
    one. With nothing to spray the record is untouched and no routes are made.
    """
    houses = [_corner(i, j) for i, j, value in _cells(record) if _is_house(value)]
    pending = [_corner(i, j) for i, j, value in _cells(record) if _needs_spray(value)]
    if not pending:
        return []
    if count < 1:
        raise ValueError("at least one drone is needed")
    if count > len(houses):
        raise ValueError(f"{count} drones need {count} houses, the field has {len(houses)}")

    routes = [[house] for house in houses[:count]]
    while pending:
        for route in routes:
            here = route[-1]
            nearest, nearest_distance = pending[0], _FAR
            for candidate in pending:
                d = distance(here, candidate)
                if d < nearest_distance:
                    nearest, nearest_distance = candidate, d
            route.append(nearest)
            pending.remove(nearest)
            if not pending:
                break
    for route in routes:
        route.append(route[0])

    for row in record:
        for j, value in enumerate(row):
            if value >= 10 and value % 10 != 0:
                row[j] = value - 1
    return routes


@dataclass
class _Flight:
    route: list[Point]
    leg: int
    x: float
    y: float
    step_x: float = 0.0
    step_y: float = 0.0

    @property
    def flying(self) -> bool:
        return self.leg < len(self.route)

    def head_for(self, from_x: int, from_y: int, target: Point) -> None:
        steps = max(abs(target.x - from_x), abs(target.y - from_y))
        steps = max(steps, 1) / _SPEED
        self.step_x = (target.x - from_x) / steps
        self.step_y = (target.y - from_y) / steps

    def advance(self) -> None:
        self.x += self.step_x
        self.y += self.step_y
        if not self.flying:
            self.step_x = self.step_y = 0.0
            return
        target = self.route[self.leg]
        if abs(int(self.x - target.x)) <= _ARRIVAL and abs(int(self.y - target.y)) <= _ARRIVAL:
            self.leg += 1
            if self.flying:
                self.head_for(int(self.x), int(self.y), self.route[self.leg])
            else:
                self.step_x = self.step_y = 0.0


def spray_frames(routes: Sequence[Sequence[Point]]) -> Iterator[dict[int, Point]]:
    """Animation frames of drones flying their routes at the same time.

    Each frame maps a drone's index to the position it is drawn at. A drone
    whose route is only its house and the way back stays on the ground.
    """
    flights: dict[int, _Flight] = {}
    for index, route in enumerate(routes):
        if len(route) < 2:
            raise ValueError("a route needs a start and an end")
        if len(route) == 2:
            continue
        points = [_as_point(p) for p in route]
        flight = _Flight(points, 1, float(points[0].x), float(points[0].y))
        flight.head_for(points[0].x, points[0].y, points[1])
        flights[index] = flight
    return _frames(flights)


def _frames(flights: dict[int, _Flight]) -> Iterator[dict[int, Point]]:
    while any(flight.flying for flight in flights.values()):
        yield {
            index: Point(int(flight.x), int(flight.y))
            for index, flight in flights.items()
            if flight.flying
        }
        for flight in flights.values():
            flight.advance()


def one_round_route(record: Record, start: Point) -> list[Point]:
    """A single loop from the start over every sick plant and back.

    The farthest sick plant B fixes the line from the start A. Plants on one
    side of AB (and B itself) are flown in order of rising projection onto AB,
    then the plants on the other side in order of falling positive projection.
    When no plant on the far side has a positive projection, the last plant
    flown is repeated in its place.
    """
    points = [
        _corner(i, j) for i, j, value in _cells(record) if value >= 10 and value % 10 != 0
    ]
    if not points:
        return [_shift(start, _SPRITE_OFFSET)] * 2

    farthest, far_distance = None, 0.0
    for index, point in enumerate(points):
        d = distance(start, point)
        if d > far_distance:
            farthest, far_distance = index, d
    if farthest is None:
        # Every sick plant lies under the start; there is no line to order them by.
        return [_shift(p, _SPRITE_OFFSET) for p in [start, *points, start]]

    end = points[farthest]
    projections = [projection(start, end, p) for p in points]
    positive = [
        index == farthest or relative_position(start, end, p) >= 0
        for index, p in enumerate(points)
    ]

    route = [start]
    visited: set[int] = set()
    last = farthest
    for _ in range(sum(positive)):
        best = _FAR
        for index in range(len(points)):
            if positive[index] and index not in visited and projections[index] < best:
                best, last = projections[index], index
        visited.add(last)
        route.append(points[last])
    for _ in range(len(points) - sum(positive)):
        best = 0.0
        for index in range(len(points)):
            if not positive[index] and index not in visited and projections[index] > best:
                best, last = projections[index], index
        visited.add(last)
        route.append(points[last])
    route.append(start)
    return [_shift(p, _SPRITE_OFFSET) for p in route]