from __future__ import annotations

import logging

from _infra import banner, run

from kungfu import Error, Ok

from purelog import Log, WriterResult, compose_result, lift as L

logger = logging.getLogger("fallible_pipeline")


def strip(s: str) -> WriterResult[str, str, Log[str]]:
    return L.up.ok(s.strip(), log=Log.of(f"strip({s!r})"))


def parse(s: str) -> WriterResult[int, str, Log[str]]:
    return L.up.catching(int, on_error=str, log=Log.of(f"parse({s!r})"))(s)


def main() -> None:
    banner("02_fallible_pipeline: compose_result + Log + emit")

    pipeline = compose_result(strip, parse, join=Log.combine)

    for raw in (" 42 ", "forty-two"):
        wr = pipeline(raw)
        L.down.emit_result(wr, logger)
        match wr.result:
            case Ok(number):
                print(f"ok: {number}")
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    run(main)
