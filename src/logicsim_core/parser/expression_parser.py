# src/logicsim_core/parser/expression_parser.py

"""
Turns the text of an update's right-hand side into an expression tree.

Expressions are written in Python's own Boolean syntax and parsed with the `ast`
module, so precedence and parenthesisation follow Python exactly. Only a small
subset is accepted:

- identifiers (signal names)
- `and` / `&`, `or` / `|`
- `not` / `~`

Everything else (literals, calls, comparisons, attribute access, ...) is
rejected with a `SyntaxError` naming the offending construct. The caller wraps
that into an `ExpressionSyntaxError` carrying the signal and file context.
"""

import ast
import logging
from functools import reduce

from ..expressions import And, ExpressionNode, Not, Or, Signal

logger = logging.getLogger(__name__)


class _ExpressionBuilder(ast.NodeVisitor):
    """Rebuilds a restricted Python AST as an expression tree."""

    def visit_Expression(self, node: ast.Expression) -> ExpressionNode:
        return self.visit(node.body)

    def visit_Name(self, node: ast.Name) -> ExpressionNode:
        return Signal(node.id)

    def visit_BoolOp(self, node: ast.BoolOp) -> ExpressionNode:
        operands = [self.visit(value) for value in node.values]
        combine = And if isinstance(node.op, ast.And) else Or
        # `a and b and c` arrives as one node with three values; fold left.
        return reduce(combine, operands)

    def visit_BinOp(self, node: ast.BinOp) -> ExpressionNode:
        if isinstance(node.op, ast.BitAnd):
            return And(self.visit(node.left), self.visit(node.right))
        if isinstance(node.op, ast.BitOr):
            return Or(self.visit(node.left), self.visit(node.right))
        return self.generic_visit(node)

    def visit_UnaryOp(self, node: ast.UnaryOp) -> ExpressionNode:
        if isinstance(node.op, (ast.Not, ast.Invert)):
            return Not(self.visit(node.operand))
        return self.generic_visit(node)

    def generic_visit(self, node: ast.AST):
        raise SyntaxError(f"unsupported construct '{type(node).__name__}' in Boolean expression")


class ExpressionParser:
    """
    A stateless service that parses Boolean expression text.
    """
    def parse(self, expression_text: str) -> ExpressionNode:
        """
        Parses `expression_text` into an expression tree.

        Raises:
            SyntaxError: If the text is empty, is not valid Python syntax, or
                         uses anything beyond names, and/or/not and &/|/~.
        """
        if not expression_text or not expression_text.strip():
            raise SyntaxError("expression is empty")
        tree = ast.parse(expression_text.strip(), mode='eval')
        expression = _ExpressionBuilder().visit(tree)
        logger.debug(f"Parsed expression '{expression_text}' as {expression}")
        return expression
