from dataclasses import dataclass, field
from typing import Optional, Tuple

from .logging_system import LogLevel
from .rpn.codegen import GLSL_DIALECT, NamingConvention
from .expression_tree.utils.simplifier import DEFAULT_MAX_PASSES


@dataclass
class EngineConfig:
    # None leaves the process-wide logger as it is
    log_level: Optional[LogLevel] = None
    log_to_file: bool = False
    simplify_max_passes: int = DEFAULT_MAX_PASSES
    dialect: NamingConvention = field(default_factory=lambda: GLSL_DIALECT)
    # names bound by the generated shader wrapper itself
    reserved_names: Tuple[str, ...] = ('i', 'x', 'pi', 't')

    def __post_init__(self):
        if self.simplify_max_passes < 1:
            raise ValueError(f"simplify_max_passes must be at least 1, got {self.simplify_max_passes}")
