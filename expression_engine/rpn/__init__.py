"""Consumers of RPN sequences: numeric evaluation and source generation."""

from .evaluator import evaluate, free_variables, compute_expression
from .codegen import (
    NamingConvention, GLSL_DIALECT, PYTHON_DIALECT,
    ShaderSource, format_literal, to_source_string, build_shader_source
)

__all__ = [
    'evaluate', 'free_variables', 'compute_expression',
    'NamingConvention', 'GLSL_DIALECT', 'PYTHON_DIALECT',
    'ShaderSource', 'format_literal', 'to_source_string', 'build_shader_source'
]
