"""Exception types raised by the core."""


class SwatchError(Exception):
    """Base class for swatchkit errors."""


class MalformedHex(SwatchError, ValueError):
    """Text is not a 3- or 6-digit hex colour (or a CSS rgb()/rgba() string)."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(f'Malformed colour: {text!r}')


class InvalidColorInput(SwatchError, ValueError):
    """A contrast input could not be turned into a colour."""

    def __init__(self, which: str, value: object):
        self.which = which
        self.value = value
        super().__init__(f'Invalid {which} colour: {value!r}')
