from datetime import datetime, timedelta, timezone

# Timestamps SDP sao segundos NTP (epoch 1900-01-01)
NTP_EPOCH = datetime(1900, 1, 1, tzinfo=timezone.utc)


def ntp_to_datetime(seconds: int) -> datetime | None:
    """Converte segundos NTP em datetime UTC (None se fora do intervalo)"""
    try:
        return NTP_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def _describe(seconds: int) -> str:
    when = ntp_to_datetime(seconds)
    if when is None:
        return f"{seconds} (NTP)"
    return f"{seconds} (NTP, {when:%Y-%m-%d %H:%M:%S} UTC)"


def format_timing(start: int, stop: int) -> str:
    """
    Descricao legivel do campo t=.

    ``0 0`` e uma sessao permanente (RFC 4566), diferente de "inicio
    imediato sem fim" apesar de ambos serem literalmente zero.
    """
    if start == 0 and stop == 0:
        return "0 0 (permanent/unbounded session)"

    start_str = "0 (immediate start)" if start == 0 else _describe(start)
    stop_str = "0 (no end / unbounded)" if stop == 0 else _describe(stop)
    return f"{start_str} -> {stop_str}"
