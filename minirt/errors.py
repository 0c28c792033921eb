"""Scene-file error messages and the exception that carries them."""

from __future__ import annotations

ERR_ARG = "Error: Wrong format\nTry: ./miniRT [FILE].rt\n"
ERR_NAME = "Error\nMap name doesn't end with '.rt'\n"
ERR_OPEN = "Error\nCan't open file\n"
ERR_READ = "Error\nCan't read file or empty file\n"
ERR_UNKNOWN = "Error\nUnknow id the in file\n"
ERR_DECIMAL = "Error\nMore than one '.' in the number\n"
ERR_NOT_NUMERIC = "Error\nNot a numeric character in a number\n"
ERR_LIGHT_RATIO = (
    "Error\nRatio of the ambient light or the light must be in [0.0;1.0]\n"
)
ERR_COLOR = "Error\nColors must be in [0;255]\n"
ERR_TOO_LONG = "Error\nToo much information in one line\n"
ERR_ORIENTATION = (
    "Error\nOrientation value must be in [-1;1] and cannot be {0, 0, 0}\n"
)
ERR_FOV = "Error\nFOV must be in [0;180]\n"
ERR_WRONG_ID = "Error\nWrong identifier or wrong format\n"
ERR_CAMERA_ANGLE = "Error\nAngle of the camera must be in [0;180]\n"
ERR_MISSING = "Error\nMissing or wrong information\n"
ERR_DIAMETER = "Error\nDiameter must be positive\n"
ERR_AMBIENT_COUNT = "Error\nDifferent than 1 ambient light\n"
ERR_CAMERA_COUNT = "Error\nDifferent than 1 camera\n"
ERR_LIGHT_COUNT = "Error\nDifferent than 1 light\n"
ERR_OVERFLOW = "Error\nValue overflow or underflow\n"

_PREFIX = "Error\n"


class SceneError(ValueError):
    """Raised when a scene description is invalid or cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    @property
    def detail(self) -> str:
        """The message without its leading 'Error' line and trailing newline."""
        text = self.message
        if text.startswith(_PREFIX):
            text = text[len(_PREFIX):]
        return text.rstrip("\n")