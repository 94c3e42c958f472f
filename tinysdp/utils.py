import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def to_int(token: str, bits: int = 64) -> int:
    """Converte token decimal ASCII para int com sinal de `bits` bits (ValueError se invalido)"""
    # int() aceitaria "1_000", espacos e digitos unicode
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    value = int(token)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"integer out of {bits}-bit range: {token!r}")
    return value


def split_lines(text: str) -> list[str]:
    """Quebra o texto em linhas por CRLF ou LF"""
    return _LINE_SPLIT_RE.split(text)
