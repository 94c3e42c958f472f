from enum import Enum


class SDPError(Exception):
    """Erro base do TinySDP"""


class ParseFailureKind(Enum):
    """Tipos de falha estrutural no parse"""

    MALFORMED_FIELD = "malformed_field"
    MISSING_ORIGIN = "missing_origin"


class ParseFailure(SDPError, ValueError):
    """Falha estrutural que aborta o parse inteiro (nenhuma sessao parcial)"""

    def __init__(
        self,
        kind: ParseFailureKind,
        message: str,
        field_type: str | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.field_type = field_type
        self.line = line

    @classmethod
    def malformed(cls, field_type: str, line: str, reason: str) -> "ParseFailure":
        return cls(
            ParseFailureKind.MALFORMED_FIELD,
            f"Malformed '{field_type}=' line ({reason}): {line!r}",
            field_type=field_type,
            line=line,
        )

    @classmethod
    def missing_origin(cls) -> "ParseFailure":
        return cls(
            ParseFailureKind.MISSING_ORIGIN,
            "Session has no well-formed 'o=' line",
            field_type="o",
        )
