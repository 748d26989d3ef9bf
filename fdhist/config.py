from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HistConfig:
    column: int = 1  # one-based
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    verbose: bool = False
    emit_zero_bins: bool = False
    input_files: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.column < 1:
            raise ValueError("column must be at least 1, got %d" % self.column)
        if (self.minimum is not None and self.maximum is not None
                and self.minimum > self.maximum):
            raise ValueError("minimum %r is greater than maximum %r"
                             % (self.minimum, self.maximum))
        object.__setattr__(self, "input_files", tuple(self.input_files))
