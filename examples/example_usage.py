import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from expression_engine import (
  EngineConfig, ExpressionEngine, ExpressionError, LogLevel, PYTHON_DIALECT
)
from expression_engine.expression_tree import latex_representation


def evaluate_sample(engine):
  """Parse once, evaluate on a few bindings and print the shader form"""
  source = "a*x*x + exp(exp(-b*x + c))"
  rpn = engine.parse(source)
  print(f"Expression: {source}")
  print("RPN:", ' '.join(token.text for token in rpn))
  print("Free variables:", sorted(engine.free_variables(rpn)))

  bindings = {'a': 1, 'b': 2, 'c': -10, 'x': 10}
  print(f"Value at {bindings}: {engine.evaluate(rpn, bindings)}")
  print(f"Value at x = i: {engine.evaluate(rpn, dict(bindings, x=1j))}")

  print("GLSL:", engine.to_source_string(rpn))
  print("Shader uniforms:", engine.shader_source(source).uniforms)


def sweep(engine):
  """Evaluate the same RPN over a grid, the way a renderer samples a plot"""
  rpn = engine.parse("sin(x)*exp(-x^2/4)")
  grid = np.linspace(-4.0, 4.0, 9)
  values = [engine.evaluate(rpn, {'x': x}) for x in grid]
  for x, value in zip(grid, values):
    print(f"  x = {x:5.1f}  f = {value: .6f}")


def differentiate(engine):
  source = "cos(exp(-a*x^2))"
  tree = engine.to_tree(engine.parse(source))
  result = engine.derivative(tree, 'x')
  print(f"d/dx {engine.to_infix_string(tree)} = {engine.to_infix_string(result)}")
  print("LaTeX:", latex_representation(result))

  for bad in ("abs(x)", "x^y"):
    try:
      engine.derivative(engine.to_tree(engine.parse(bad)), 'x')
    except ExpressionError as exc:
      print(f"d/dx {bad}: {exc}")


def main():
  engine = ExpressionEngine(EngineConfig(log_level=LogLevel.MODERATE))
  print("=" * 60)
  evaluate_sample(engine)
  print("=" * 60)
  sweep(engine)
  print("=" * 60)
  differentiate(engine)
  print("=" * 60)

  python_engine = ExpressionEngine(EngineConfig(log_level=LogLevel.SILENT, dialect=PYTHON_DIALECT))
  print("Python source:", python_engine.to_source_string(python_engine.parse("2^x - log(x)")))

  for bad in ("2 +", "1.2.3", "(x", "x $ 2"):
    try:
      python_engine.parse(bad)
    except ExpressionError as exc:
      print(f"Rejected {bad!r}: {type(exc).__name__}: {exc}")


if __name__ == "__main__":
  main()
