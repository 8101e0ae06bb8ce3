from __future__ import annotations

from _infra import banner, run

from purelog import Writer, compose


def uppercase(s: str) -> Writer[str]:
    # Locality: the stage knows nothing about the log so far, only its own entry.
    return Writer(s.upper(), "used scream! ")


def words(s: str) -> Writer[list[str]]:
    return Writer(s.split(), "used words! ")


def process(s: str) -> Writer[list[str]]:
    return compose(uppercase, words)(s)


def main() -> None:
    banner("01_kleisli_logger: Writer + compose")

    composition = process("Hello World! Today is a great day for python coding!")
    print(f"Result: {composition.value}\nLog: {composition.log}")


if __name__ == "__main__":
    run(main)
