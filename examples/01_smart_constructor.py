from __future__ import annotations

from dataclasses import dataclass

from _infra import banner, run

from kungfu import Error, Nothing, Ok, Option, Some

import mbool as B


@dataclass(frozen=True, slots=True)
class HttpHost:
    value: str


def make_http_host(text: str) -> Option[HttpHost]:
    # Locality: validation and construction in one expression, no if/else.
    return B.guarded_opt(lambda s: bool(s.strip()), text).map(HttpHost)


async def main() -> None:
    banner("01_smart_constructor: guarded + guard + when")

    for text in ("example.com", "   "):
        match make_http_host(text):
            case Some(host):
                print(f"host: {host.value}")
            case Nothing():
                print(f"rejected: {text!r}")

    evens = [n for x in range(10) for n in B.guarded_list(lambda n: n % 2 == 0, x)]
    print(f"evens: {evens}")

    port = 8080
    checked = B.guarded(lambda p: 0 < p < 65536, port, error=lambda p: f"bad port: {p}")
    match await checked:
        case Ok(value):
            print(f"port: {value}")
        case Error(err):
            print(f"error: {err}")

    print(f"when(Some(True)): {B.when_opt(Some(True), lambda: Some(None))!r}")
    print(f"when(Nothing): {B.when_opt(Nothing(), lambda: Some(None))!r}")


if __name__ == "__main__":
    run(main)
