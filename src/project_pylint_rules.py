"""Custom pylint rules for annotation style and copy-on-write builder usage."""

from __future__ import annotations

from collections.abc import Iterable

from astroid import bases, nodes
from pylint.checkers import BaseChecker
from pylint.checkers.utils import safe_infer
from pylint.lint import PyLinter


_MESSAGE_PREFER_OPTIONAL = "prefer-optional"
_MESSAGE_DISCARDED_BUILDER_RESULT = "discarded-builder-result"

_FROZEN_VALUE_QNAME = "openapi_builder.base.SpecValue"
_BUILDER_PREFIX = "with_"


class ProjectRulesChecker(BaseChecker):
    """Project-specific AST checks."""

    name = "project-rules"

    msgs = {
        "C9501": (
            "Use Optional[T] instead of T | None in annotations",
            _MESSAGE_PREFER_OPTIONAL,
            "Project style requires Optional[T] for nullable annotations.",
        ),
        "W9510": (
            "Result of %s() on frozen %s is discarded",
            _MESSAGE_DISCARDED_BUILDER_RESULT,
            "Builders on frozen OpenAPI objects return a modified copy and leave the "
            "receiver unchanged, so a call used as a statement has no effect.",
        ),
    }

    def visit_annassign(self, node: nodes.AnnAssign) -> None:
        """Validate annotation style for annotated assignments."""
        self._check_annotation(node.annotation)

    def visit_arguments(self, node: nodes.Arguments) -> None:
        """Validate annotation style for function arguments."""
        for annotation in _iter_argument_annotations(node):
            self._check_annotation(annotation)

    def visit_functiondef(self, node: nodes.FunctionDef) -> None:
        """Validate annotation style for function return type."""
        if node.returns is not None:
            self._check_annotation(node.returns)

    def visit_expr(self, node: nodes.Expr) -> None:
        """Flag ``value.with_x(...)`` statements whose copy is thrown away."""
        call = node.value
        if not isinstance(call, nodes.Call):
            return
        func = call.func
        if not isinstance(func, nodes.Attribute) or not func.attrname.startswith(_BUILDER_PREFIX):
            return
        receiver = safe_infer(func.expr)
        if not isinstance(receiver, bases.Instance):
            return
        if not receiver.is_subtype_of(_FROZEN_VALUE_QNAME):
            return
        self.add_message(
            _MESSAGE_DISCARDED_BUILDER_RESULT,
            node=node,
            args=(func.attrname, receiver.name),
        )

    def _check_annotation(self, annotation: nodes.NodeNG) -> None:
        for candidate in annotation.nodes_of_class(nodes.BinOp):
            if candidate.op != "|":
                continue
            if _is_none_literal(candidate.left) or _is_none_literal(candidate.right):
                self.add_message(_MESSAGE_PREFER_OPTIONAL, node=candidate)


def _iter_argument_annotations(arguments: nodes.Arguments) -> Iterable[nodes.NodeNG]:
    for group in (
        arguments.posonlyargs_annotations,
        arguments.annotations,
        arguments.kwonlyargs_annotations,
    ):
        yield from (annotation for annotation in group if annotation is not None)
    for annotation in (arguments.varargannotation, arguments.kwargannotation):
        if annotation is not None:
            yield annotation


def _is_none_literal(node: nodes.NodeNG) -> bool:
    return isinstance(node, nodes.Const) and node.value is None


def register(linter: PyLinter) -> None:
    """Register checker."""
    linter.register_checker(ProjectRulesChecker(linter))
