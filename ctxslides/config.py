"""
ctxslides/config.py -- Converter configuration
"""

from __future__ import annotations

from dataclasses import dataclass

from ctxslides.renderer.templates import EPILOGUE, PROLOGUE

# "passthrough": emit RawBlock text verbatim. "fail": abort the conversion.
RAW_BLOCK_MODES = ("passthrough", "fail")


@dataclass
class ConverterConfig:
    """Configuration for the conversion pipeline."""

    # Rendering
    prologue: str = PROLOGUE
    epilogue: str = EPILOGUE

    # RawBlock handling
    raw_block: str = "passthrough"  # "passthrough" | "fail"

    def __post_init__(self):
        if self.raw_block not in RAW_BLOCK_MODES:
            raise ValueError(
                f"raw_block must be one of {', '.join(RAW_BLOCK_MODES)}, got {self.raw_block!r}"
            )
