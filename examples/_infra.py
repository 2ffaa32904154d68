from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def _empty_dirs() -> set[str]:
    return set()


@dataclass(slots=True)
class FakeFilesystem:
    """In-memory stand-in for path lookups."""

    config_path: str | None = None
    dirs: set[str] = field(default_factory=_empty_dirs)
    delay_seconds: float = 0.0

    async def find_config(self) -> Result[str, Failure]:
        await asyncio.sleep(self.delay_seconds)
        if self.config_path is None:
            return Error(Failure("config: not found"))
        return Ok(self.config_path)

    async def is_dir(self, path: str) -> Result[bool, Failure]:
        await asyncio.sleep(self.delay_seconds)
        print(f"  checked {path}")
        return Ok(path in self.dirs)

    async def make_dir(self, path: str) -> Result[None, Failure]:
        print(f"  created {path}")
        self.dirs.add(path)
        return Ok(None)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
