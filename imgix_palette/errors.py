# Copyright (c) 2026 imgix-palette contributors
# SPDX-License-Identifier: MIT

"""Exception types raised by imgix-palette."""


class ImgixPaletteError(Exception):
    """Base class for all imgix-palette errors."""


class FetchFailure(ImgixPaletteError):
    """
    The palette document could not be retrieved.

    Covers transport errors, timeouts and non-success HTTP statuses.
    The public ``get_*`` operations recover from this and return None.
    """

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch palette for {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class PaletteFormatError(ImgixPaletteError, ValueError):
    """The palette document does not have the expected shape."""
