"""Shared enumerations and fixed limits of the drone farm simulator."""

from enum import IntEnum

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

GRID_ROWS = 21
GRID_COLS = 26

WEIGHT_MAX = 60
WEIGHT_MIN = 30
WING_MAX = 8
WING_MIN = 4
TIME_MAX = 10
TIME_MIN = 5

CROP1_STATE1 = 12
CROP1_STATE2 = 24
CROP2_STATE1 = 14
CROP2_STATE2 = 28
CROP3_STATE1 = 10
CROP3_STATE2 = 20

CALENDER_MAX = 60
MAX = 0x3F3F3F3F
BUG = 4

LEFTARROW = 1
RIGHTARROW = 2


class Page(IntEnum):
    """Screens the application can switch between."""

    WELCOME = 0
    LOGIN = 1
    SIGNUP = 2
    HOME = 3
    FIELD = 4
    DRONE = 5
    PESTICIDE = 6
    DETECTOR = 7
    QUIT = 8
    README = 9
    DRAW_FIELD = 10
    PLANT = 11
    HOUSE = 12
    DRONE_LIST = 13


class Language(IntEnum):
    """Interface language."""

    CHINESE = 1
    ENGLISH = 2


class ButtonState(IntEnum):
    """How a button is to be drawn."""

    PAINT = 0
    RECOVER = 1
    LIGHT = 2
    DELETE = 3


class CropStage(IntEnum):
    """Growth stage of a crop."""

    SPROUT = 1
    TRANSITION = 2
    CROP = 3


class Health(IntEnum):
    """Health of a crop."""

    SICK = 1
    HEALTHY = 2