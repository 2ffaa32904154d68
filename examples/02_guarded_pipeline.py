from __future__ import annotations

from _infra import Failure, FakeFilesystem, banner, run

from kungfu import Error, LazyCoroResult, Ok

import mbool as B


def ensure_cache_dir(fs: FakeFilesystem, path: str) -> LazyCoroResult[None, Failure]:
    # make_dir runs only when the directory is missing.
    return B.unless(
        LazyCoroResult(lambda: fs.is_dir(path)),
        LazyCoroResult(lambda: fs.make_dir(path)),
    )


def config_dir(fs: FakeFilesystem) -> LazyCoroResult[str, Failure]:
    # Look up a path, then require that it is a directory.
    return LazyCoroResult(fs.find_config).then(
        lambda path: B.guard(
            LazyCoroResult(lambda: fs.is_dir(path)),
            error=lambda: Failure(f"{path}: not a directory"),
        ).map(lambda _: path)
    )


async def main() -> None:
    banner("02_guarded_pipeline: guardM + unlessM + short-circuit &&^")

    fs = FakeFilesystem(config_path="/etc/app", dirs={"/etc/app"})

    await ensure_cache_dir(fs, "/var/cache/app")
    await ensure_cache_dir(fs, "/var/cache/app")

    for candidate in (fs, FakeFilesystem(config_path="/etc/app.conf"), FakeFilesystem()):
        match await config_dir(candidate):
            case Ok(path):
                print(f"config dir: {path}")
            case Error(err):
                print(f"error: {err}")

    # The second check is skipped: the first one already answered False.
    both = B.and_(
        LazyCoroResult(lambda: fs.is_dir("/nope")),
        LazyCoroResult(lambda: fs.is_dir("/etc/app")),
    )
    print(f"both dirs: {await both!r}")


if __name__ == "__main__":
    run(main)
