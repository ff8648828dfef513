"""
Expression Engine

Programmatic surface used by rendering code: parse a user string once, then
evaluate it, cross-compile it to shader source, or differentiate it.
"""

from typing import Mapping, Optional, Set

from .config import EngineConfig
from .expression_tree.core.builder import to_tree
from .expression_tree.core.node import Node, to_infix_string
from .expression_tree.expression import Expression
from .expression_tree.utils.differentiator import derivative
from .expression_tree.utils.simplifier import simplify
from .logging_system import LogLevel, configure_logging, get_logger, log_info
from .numeric.operations import Numeric
from .parsing.parser import parse
from .parsing.shunting_yard import RpnSequence
from .rpn.codegen import ShaderSource, build_shader_source, to_source_string
from .rpn.evaluator import evaluate, free_variables

__all__ = [
    'ExpressionEngine',
    'parse', 'evaluate', 'free_variables', 'to_source_string',
    'to_tree', 'simplify', 'derivative', 'to_infix_string'
]


class ExpressionEngine:
    """
    Configured front end over the parsing, evaluation and symbolic modules.

    Holds no state besides its configuration, so one instance can be shared
    between threads. Logging is process-wide: an engine whose config sets
    log_level or log_to_file reconfigures the global logger on construction,
    so the most recently constructed such engine decides what every engine
    logs. With the default config the global logger is left untouched.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        if self.config.log_level is not None or self.config.log_to_file:
            configure_logging(log_level=self.config.log_level or get_logger().log_level,
                              log_to_file=self.config.log_to_file)

    def parse(self, source: str) -> RpnSequence:
        rpn = parse(source)
        log_info(f"Parsed {source!r} into {len(rpn)} RPN tokens", LogLevel.MODERATE)
        return rpn

    def evaluate(self, rpn: RpnSequence, bindings: Optional[Mapping[str, object]] = None) -> Numeric:
        return evaluate(rpn, bindings)

    def compute(self, source: str, bindings: Optional[Mapping[str, object]] = None) -> Numeric:
        return evaluate(self.parse(source), bindings)

    def free_variables(self, rpn: RpnSequence) -> Set[str]:
        return free_variables(rpn)

    def to_source_string(self, rpn: RpnSequence) -> str:
        return to_source_string(rpn, self.config.dialect)

    def shader_source(self, source: str) -> ShaderSource:
        return build_shader_source(self.parse(source), self.config.reserved_names)

    def to_tree(self, rpn: RpnSequence) -> Node:
        return to_tree(rpn)

    def simplify(self, tree: Node) -> Node:
        return simplify(tree, self.config.simplify_max_passes)

    def derivative(self, tree: Node, variable: str) -> Node:
        result = derivative(tree, variable, self.config.simplify_max_passes)
        log_info(f"d/d{variable} {tree.to_string()} = {result.to_string()}", LogLevel.DETAILED)
        return result

    def to_infix_string(self, tree: Node) -> str:
        return to_infix_string(tree)

    def expression(self, source: str) -> Expression:
        return Expression.from_string(source)
