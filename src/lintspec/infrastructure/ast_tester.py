"""AST rule tester: default rule-testing engine.

Implements RuleTesterProtocol using Python AST.

A rule's create(context) returns handlers keyed by AST node class name.
"Name:exit" handlers run after the node's children:

    def create(context):
        def check_call(node):
            if isinstance(node.func, ast.Name) and node.func.id == "print":
                context.report(node=node, message="Unexpected print")
        return {"Call": check_call}

Mismatched expectations raise AssertionError. Malformed cases and
syntax errors raise TypeError/SyntaxError and are reported as unexpected.
"""

from __future__ import annotations

import ast
import pprint
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from lintspec.domain.model.artifact import get_field

if TYPE_CHECKING:
    from collections.abc import Callable

    from lintspec.domain.ports.rule_tester import CaseSuite

Handler: TypeAlias = "Callable[[ast.AST], object]"

RULE_ID_PREFIX = "rule-to-test"
DEFAULT_FILENAME = "<input>"

# Expected-error fields compared against diagnostics, in order.
_COMPARED_FIELDS = ("message", "message_id", "line", "column", "end_line", "end_column")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Problem reported by a rule.

    Lines are 1-based. Columns are 1-based.

    Attributes:
        rule_id: Id of reporting rule
        message: Rendered message
        line: Start line
        column: Start column
        end_line: End line (None if unknown)
        end_column: End column (None if unknown)
        node_type: AST class name of reported node
        message_id: Key into meta.messages if used
    """

    rule_id: str
    message: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None
    node_type: str | None = None
    message_id: str | None = None


class RuleContext:
    """Context passed to a rule's create().

    Attributes:
        rule_id: Id diagnostics are reported under
        filename: Case filename or "<input>"
        options: Case options (list)
        settings: Shared settings from config and case
        source: Source under test
    """

    def __init__(
        self,
        rule_id: str,
        source: str,
        *,
        filename: str = DEFAULT_FILENAME,
        options: list[Any] | None = None,
        settings: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self.rule_id = rule_id
        self.source = source
        self.filename = filename
        self.options = options or []
        self.settings = dict(settings or {})
        self.diagnostics: list[Diagnostic] = []
        self._messages = messages or {}

    def report(
        self,
        node: ast.AST | None = None,
        message: str | None = None,
        *,
        message_id: str | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        """Record a diagnostic at node.

        Either message or message_id (a key of the rule's meta.messages)
        must be given. data fills "{placeholders}" in the message.

        Raises:
            TypeError: If neither message nor a known message_id is given
        """
        if message is None:
            if message_id is None or message_id not in self._messages:
                raise TypeError(f"report() needs a message or a known message_id, got {message_id!r}")
            message = self._messages[message_id]
        if data:
            message = message.format(**data)

        line, column, end_line, end_column = self._span(node)
        self.diagnostics.append(
            Diagnostic(
                rule_id=self.rule_id,
                message=message,
                line=line,
                column=column,
                end_line=end_line,
                end_column=end_column,
                node_type=type(node).__name__ if node is not None else None,
                message_id=message_id,
            )
        )

    def _span(self, node: ast.AST | None) -> tuple[int, int, int | None, int | None]:
        """Node position, whole source for nodes without one (Module)."""
        lineno = getattr(node, "lineno", None)
        if lineno is not None:
            end_lineno = getattr(node, "end_lineno", None)
            end_col = getattr(node, "end_col_offset", None)
            return (
                lineno,
                getattr(node, "col_offset", 0) + 1,
                end_lineno,
                end_col + 1 if end_col is not None else None,
            )

        lines = self.source.split("\n")
        return 1, 1, len(lines), len(lines[-1]) + 1


class _Dispatcher(ast.NodeVisitor):
    """Calls rule handlers in source order, exit handlers after children."""

    def __init__(self, handlers: Mapping[str, Handler]) -> None:
        self._handlers = handlers

    def visit(self, node: ast.AST) -> None:
        name = type(node).__name__

        enter = self._handlers.get(name)
        if enter is not None:
            enter(node)

        self.generic_visit(node)

        leave = self._handlers.get(f"{name}:exit")
        if leave is not None:
            leave(node)


def parse_source(code: str, filename: str, language_options: Mapping[str, Any]) -> ast.AST:
    """Parse code with the configured grammar.

    Args:
        code: Source under test
        filename: Name shown in syntax errors
        language_options: mode ("exec", "eval", "single") and
            feature_version ("latest", a minor int or a (3, minor) pair)

    Raises:
        SyntaxError: If code does not parse
    """
    mode = language_options.get("mode", "exec")
    feature_version = language_options.get("feature_version", "latest")

    if feature_version in (None, "latest"):
        return ast.parse(code, filename=filename, mode=mode)
    if not isinstance(feature_version, int):
        feature_version = tuple(feature_version)
    return ast.parse(code, filename=filename, mode=mode, feature_version=feature_version)


def _dump(diagnostics: list[Diagnostic]) -> str:
    return pprint.pformat([asdict(diagnostic) for diagnostic in diagnostics], sort_dicts=False)


def _errors_phrase(count: int) -> str:
    return f"{count} error" if count == 1 else f"{count} errors"


class AstRuleTester:
    """Rule tester over Python source using ast.

    Stateless: every run() builds fresh contexts.

    Example:
        AstRuleTester().run(
            "no-print",
            no_print,
            CaseSuite(valid=[{"code": "x = 1"}]),
            DEFAULT_CONFIG,
        )
    """

    def run(
        self,
        rule_name: str,
        rule: object,
        suite: CaseSuite,
        config: Mapping[str, Any],
    ) -> None:
        """Run every case of suite against rule.

        Raises:
            AssertionError: If diagnostics do not match expectations
            TypeError: If a case or the rule is malformed
            SyntaxError: If case code does not parse
        """
        for case in suite.valid:
            diagnostics = self.lint(rule_name, rule, case, config)
            if diagnostics:
                raise AssertionError(
                    f"Should have no errors but had {len(diagnostics)}: {_dump(diagnostics)}"
                )

        for case in suite.invalid:
            diagnostics = self.lint(rule_name, rule, case, config)
            self._assert_errors(case.get("errors"), diagnostics)

    def lint(
        self,
        rule_name: str,
        rule: object,
        case: Mapping[str, Any],
        config: Mapping[str, Any],
    ) -> list[Diagnostic]:
        """Run rule over the code of case and collect diagnostics."""
        create = get_field(rule, "create")
        if not callable(create):
            raise TypeError(f"rule {rule_name!r} has no callable create()")

        code = case.get("code")
        if not isinstance(code, str):
            raise TypeError(f"case code must be a str, got {type(code).__name__}")

        filename = case.get("filename") or DEFAULT_FILENAME
        settings = {**(config.get("settings") or {}), **(case.get("settings") or {})}
        messages = get_field(get_field(rule, "meta"), "messages")

        context = RuleContext(
            f"{RULE_ID_PREFIX}/{rule_name}",
            code,
            filename=filename,
            options=list(case.get("options") or []),
            settings=settings,
            messages=messages if isinstance(messages, Mapping) else None,
        )

        tree = parse_source(code, filename, config.get("language_options") or {})
        handlers = create(context) or {}
        _Dispatcher(handlers).visit(tree)

        return context.diagnostics

    def _assert_errors(self, expected: object, diagnostics: list[Diagnostic]) -> None:
        match expected:
            case bool():
                raise TypeError(f"errors must be a positive int or a non-empty list, got {expected!r}")
            case int() if expected > 0:
                self._assert_count(expected, diagnostics)
            case list() | tuple() if expected:
                self._assert_count(len(expected), diagnostics)
                for index, (want, got) in enumerate(zip(expected, diagnostics, strict=True), start=1):
                    self._assert_error(index, want, got)
            case _:
                raise TypeError(f"errors must be a positive int or a non-empty list, got {expected!r}")

    @staticmethod
    def _assert_count(count: int, diagnostics: list[Diagnostic]) -> None:
        if len(diagnostics) != count:
            raise AssertionError(
                f"Should have {_errors_phrase(count)} but had {len(diagnostics)}: {_dump(diagnostics)}"
            )

    @staticmethod
    def _assert_error(index: int, want: object, got: Diagnostic) -> None:
        if isinstance(want, str):
            want = {"message": want}
        if not isinstance(want, Mapping):
            raise TypeError(f"expected error {index} must be a str or mapping, got {type(want).__name__}")

        for key in _COMPARED_FIELDS:
            if key in want and want[key] != getattr(got, key):
                raise AssertionError(
                    f"Error {index} has {key} {getattr(got, key)!r}, expected {want[key]!r}"
                )
