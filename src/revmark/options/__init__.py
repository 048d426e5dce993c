"""Option dataclasses for revmark."""

from revmark.options.base import CloneFrozenMixin
from revmark.options.converter import ConverterOptions

__all__ = ["CloneFrozenMixin", "ConverterOptions"]
