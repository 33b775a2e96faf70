"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


ESCAPE_MIXED_REPRESENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_MIXED_REPRESENTATION",
    message="Literal mixes literal non-ASCII text with arbitrary Unicode escapes.",
    hint="Write non-ASCII characters literally, or escape all of them.",
    severity="warning",
    category="escape/mixing",
)

ESCAPE_UNRESOLVED_PRECEDENCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_UNRESOLVED_PRECEDENCE",
    message="Literal non-ASCII text conflicts with a mandatory Unicode escape.",
    hint="Pick one of the candidate renderings: escape all non-ASCII text, or keep it literal.",
    severity="warning",
    category="escape/mixing",
)

ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED",
    message="Modifier with nothing to attach to is written literally.",
    hint="Write the modifier as a Unicode escape.",
    severity="warning",
    category="escape/modifier",
)

ESCAPE_ATTACHED_MODIFIER_ESCAPED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_ATTACHED_MODIFIER_ESCAPED",
    message="Modifier attached to a preceding character is written as an escape.",
    hint="Write the modifier literally so it stays composed with its base character.",
    severity="warning",
    category="escape/modifier",
)

ESCAPE_INVISIBLE_NOT_ESCAPED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_INVISIBLE_NOT_ESCAPED",
    message="Invisible or control character is written literally.",
    hint="Write the character as a Unicode escape.",
    severity="warning",
    category="escape/invisible",
)

ESCAPE_MISSING_SPECIAL_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_MISSING_SPECIAL_ESCAPE",
    message="Character with a short escape is not written with it.",
    hint="Use the short escape form (`\\t`, `\\n`, `\\r`, `\\\"`, `\\'`, `\\\\`, `\\0`).",
    severity="warning",
    category="escape/special",
)

ESCAPE_UNNECESSARY_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ESCAPE_UNNECESSARY_ESCAPE",
    message="Printable ASCII character is written as a Unicode escape.",
    hint="Write the character literally.",
    severity="warning",
    category="escape/ascii",
)
