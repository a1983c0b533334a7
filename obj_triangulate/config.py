"""
Conversion Configuration
"""

from dataclasses import dataclass

ON_FAILURE_SKIP = "skip"
ON_FAILURE_ABORT = "abort"

ENGINE_EARCLIP = "earclip"
ENGINE_EARCUT = "earcut"


@dataclass
class TriangulateConfig:
    """
    Options for one OBJ conversion.

    Attributes:
        on_failure: "skip" drops a face or vertex record that cannot be
            parsed or triangulated and goes on; "abort" fails the conversion
        engine: "earclip" (built-in ear clipping) or "earcut" (mapbox_earcut)
        preserve_winding: Flip created triangles that face away from the
            source polygon
        label: Infix of the default target file name (lego.<label>.obj)
    """
    on_failure: str = ON_FAILURE_SKIP
    engine: str = ENGINE_EARCLIP
    preserve_winding: bool = False
    label: str = "triangulated"

    def __post_init__(self):
        if self.on_failure not in (ON_FAILURE_SKIP, ON_FAILURE_ABORT):
            raise ValueError(f"Not implemented failure policy: {self.on_failure}")

        if self.engine not in (ENGINE_EARCLIP, ENGINE_EARCUT):
            raise ValueError(f"Not implemented engine: {self.engine}")

    @property
    def abort_on_failure(self) -> bool:
        return self.on_failure == ON_FAILURE_ABORT
